from __future__ import annotations

import argparse
from typing import List, Optional

from . import __version__
from .common import debug, log
from .constants import CONFIG_FILE, DEFAULT_CLIENT
from .converter import save_config
from .core import Core, SingBoxCore
from .errors import SurgeboxError
from .external import make_external_config
from .net import fetch_subscription
from .parsing import check_url


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='surgebox',
        description='Convert a sing-box subscription into a local config and a Surge external proxy',
    )
    parser.add_argument('-u', '--url', required=True, metavar='SUBSCRIPTION',
                        help='Subscription URL (http or https)')
    # Accepted for future client targets; does not change the output yet
    parser.add_argument('-c', '--client', default=DEFAULT_CLIENT, metavar='TYPE',
                        help=f'Target client type (default: {DEFAULT_CLIENT})')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def run(url: str, client: Optional[str] = DEFAULT_CLIENT, core: Optional[Core] = None,
        config_path: str = CONFIG_FILE) -> int:
    """Validate -> fetch -> transform -> describe. Any failure stops the run with status 1."""
    if client:
        log(f"✅ Target client type is: {client}")

    try:
        sub_url = check_url(url)
        log(f"✅ Target subscription url is: {sub_url}")

        data = fetch_subscription(sub_url)
        log("✅ Successfully fetched and parsed JSON.")

        controller = save_config(data, config_path)
        log("✅ Successfully convert subscription.")
        if controller.is_empty():
            debug("no mixed inbound found, descriptor will carry empty address/port")

        external_proxy = make_external_config(controller, core or SingBoxCore(), config_path)
    except SurgeboxError as e:
        log(f"✖ Error: {e}")
        return 1

    log(f"✅ Target surge external config:\n[Proxy]\n{external_proxy}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    return run(args.url, args.client)


if __name__ == '__main__':
    raise SystemExit(main())
