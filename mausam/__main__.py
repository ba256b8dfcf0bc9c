import argparse
import sys

from mausam.config import SUPPORTED_LANGUAGES
from mausam.lookup import handle_submit
from mausam.messages import message


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mausam", description="Current weather and advice for a city.")
    parser.add_argument("city", nargs="*", help="City name")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, default=None)
    args = parser.parse_args(argv)

    result = handle_submit(" ".join(args.city), language=args.language)
    print(result["status"])
    if not result["ok"]:
        return 1

    card = result["card"]
    for key in ("temperature", "humidity", "rain_chance"):
        print(f"{message(f'label_{key}', args.language)}: {card[key]}")
    print(f"{message('label_advice', args.language)}: {card['advice']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
