"""CLI entry point for the threewords command."""

import argparse
import json
from typing import List, Optional
import sys
import uuid

from .api_client import ApiClient, ApiResponse
from .config import Settings
from .exceptions import ApiError, ConfigurationError, ValidationError
from .logging_config import bind_request_id, clear_request_id, configure_logging
from .public_api import autosuggest, convert_to_three_word_address


def _setup_argument_parser() -> argparse.ArgumentParser:
    """Setup and return command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='threewords',
        description='Query the what3words API',
    )
    parser.add_argument('--key', help='API key (defaults to API_KEY from the environment)')
    parser.add_argument('--base-url', help='API gateway (defaults to API_GATEWAY)')

    subparsers = parser.add_subparsers(dest='command', required=True)

    convert = subparsers.add_parser('convert', help='coordinates to three-word address')
    convert.add_argument('coordinates', help='"lat, lng"')
    convert.add_argument('--language', default='en')

    suggest = subparsers.add_parser('suggest', help='autosuggest for free text')
    suggest.add_argument('input', help='full or partial three-word address')
    suggest.add_argument('--language')
    suggest.add_argument('--clip-to-country', dest='clip_to_country')
    suggest.add_argument('--focus', help='"lat,lng"')

    return parser


def _output_response(response: ApiResponse) -> None:
    """Output the response body to stdout."""
    print(json.dumps(response.data, ensure_ascii=False, indent=2))


def _new_request_id() -> str:
    return f"cli_{uuid.uuid4().hex[:8]}"


def _run(args: argparse.Namespace, settings: Settings) -> ApiResponse:
    key = args.key or settings.api_key
    if args.base_url:
        client = ApiClient(args.base_url, timeout=settings.timeout_ms)
    else:
        client = settings.create_client()

    if args.command == 'convert':
        return convert_to_three_word_address(
            key,
            args.coordinates,
            language=args.language,
            api_client=client,
        )

    return autosuggest(
        key,
        args.input,
        language=args.language,
        clip_to_country=args.clip_to_country,
        focus=args.focus,
        api_client=client,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argument_parser()

    if argv is None:
        argv = sys.argv[1:]

    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return e.code or 0

    try:
        settings = Settings.from_env()
        settings.validate()
        configure_logging(settings)
        bind_request_id(_new_request_id())

        response = _run(args, settings)
        _output_response(response)

        return 0 if response.error is None else 1

    except ConfigurationError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ValidationError as e:
        print(str(e), file=sys.stderr)
        return 1
    except ApiError as e:
        print(str(e), file=sys.stderr)
        return 1
    finally:
        clear_request_id()


if __name__ == "__main__":
    sys.exit(main())
