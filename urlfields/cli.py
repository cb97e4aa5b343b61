"""
Command-line front end: encode a JSON parameters file as a query string.
"""

import argparse
import json
import logging
from typing import Any, Dict, List, Optional

from .encode import url_encoded_string
from .errors import EncodeError
from .template import fill

DEFAULT_CONFIG: Dict[str, Any] = {
    "loglevel": "INFO",
    "base": "",
    "template": None,
}

logger = logging.getLogger("urlfields")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse cmdline arguments"""
    parser = argparse.ArgumentParser(
        description="Encode parameters as a URL query string",
        usage="%(prog)s [options]",
    )

    parser.add_argument(
        "--paramsfile", help="JSON object to encode", required=True
    )

    parser.add_argument("--base", help="base URL to append the fields to")

    parser.add_argument(
        "--template", help="fill {name} placeholders instead of encoding"
    )

    parser.add_argument("--configfile", help="JSON config file")

    return parser.parse_args(argv)


def load_config(configfile: Optional[str]) -> Dict[str, Any]:
    cfg = dict(DEFAULT_CONFIG)
    if configfile:
        with open(configfile, "r", encoding="utf-8") as f:
            cfg.update(json.load(f))
    return cfg


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format=(
            "%(asctime)s %(name)s:%(levelname)-5s "
            "[%(funcName)s:%(lineno)4d] %(message)s"
        ),
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger().setLevel(level)


def run(args: argparse.Namespace) -> int:
    cfg = load_config(args.configfile)
    setup_logging(cfg["loglevel"])

    with open(args.paramsfile, "r", encoding="utf-8") as f:
        params = json.load(f)
    if not isinstance(params, dict):
        logger.error("%s does not hold a JSON object", args.paramsfile)
        return 1

    template = args.template if args.template is not None else cfg["template"]
    if template is not None:
        print(fill(template, params))
        return 0

    base = args.base if args.base is not None else cfg["base"]
    try:
        print(url_encoded_string(params, base=base))
    except EncodeError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_args(argv))
