import logging
import sys

from dotenv import load_dotenv

from browser_model import NavigationModel
from browser_model.config import NavigationConfig
from browser_model.errors import NavigationError
from browser_model.resolver import resolver_from_config

load_dotenv()


def main(argv: list[str]) -> int:
    if not argv:
        print("usage: python -m browser_model ADDRESS [ADDRESS ...]", file=sys.stderr)
        return 2

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = NavigationConfig.from_env()
    status = 0
    with resolver_from_config(config) as resolver:
        model = NavigationModel(resolver, config=config)
        for address in argv:
            try:
                location = model.navigate_to(address)
                print(f"{address} -> {location}")
            except NavigationError as e:
                print(f"{address}: {e}", file=sys.stderr)
                status = 1

        print(model.state().model_dump_json(indent=2))
    return status


def run():
    sys.exit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
