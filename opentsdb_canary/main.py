#!/usr/bin/env python3
"""
opentsdb-canary query CLI

Renders the OpenTSDB query of every configured metric for one canary
scope, one ``name<TAB>query`` line per metric.
"""

import argparse
import logging
import sys
from typing import Dict, List, Optional

import yaml
from pydantic import ValidationError

from .canary.scope import CanaryScope
from .canary.scope_factory import build_scope
from .core.config import load_config_from, resolve_config_path
from .query_config import build_query

logger = logging.getLogger("opentsdb_canary")


def parse_param(value: str) -> tuple:
    """Parse a ``key=value`` extended scope param."""
    key, sep, param_value = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got '{value}'")
    return key, param_value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render OpenTSDB canary queries")
    parser.add_argument("-c", "--config", help="Path to YAML config")
    parser.add_argument("--scope", required=True, help="scope value, e.g. 1.0.0")
    parser.add_argument("--scope-key", dest="scope_key",
                        help="tag name of the scope (default: _scope_key param or 'scope')")
    parser.add_argument("--param", action="append", type=parse_param, default=[],
                        help="extended scope param key=value (repeatable)")
    parser.add_argument("--metric", help="render only the named metric")
    parser.add_argument("--log-level", dest="log_level",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging level")
    return parser


def render_queries(config, scope, metric: Optional[str] = None) -> List[Dict[str, str]]:
    """Render each configured metric (or only the named one) for the scope."""
    if metric is None:
        metrics = config.metrics
    else:
        found = config.get_metric(metric)
        metrics = [found] if found is not None else []
    return [{"name": m.name, "query": build_query(m.query, scope)} for m in metrics]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the query CLI."""
    args = build_parser().parse_args(argv)

    config_path = resolve_config_path(args.config)
    try:
        config = load_config_from(config_path)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        logging.basicConfig(level=logging.ERROR)
        logger.error(f"Failed to load config from {config_path}: {e}")
        return 2

    logging.basicConfig(level=getattr(logging, args.log_level or config.log_level))
    logger.info(f"Loaded configuration from: {config_path}")

    canary_scope = CanaryScope(scope=args.scope, extended_scope_params=dict(args.param))
    scope = build_scope(canary_scope, scope_key=args.scope_key)

    rendered = render_queries(config, scope, args.metric)
    if args.metric is not None and not rendered:
        logger.error(f"Metric '{args.metric}' not found in {config_path}")
        return 2

    for entry in rendered:
        print(f"{entry['name']}\t{entry['query']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
