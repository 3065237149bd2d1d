import argparse
import json
import logging
import sys

from .builder import CompletionDataBuilder
from .config import Config
from .responses import build_completion_response, candidate_from_dict, record_to_dict

logger = logging.getLogger(__name__)


def _load_candidates(stream):
    data = json.load(stream)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError("expected a candidate object or a list of candidates")
    return [candidate_from_dict(item) for item in data]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Render completion candidates into editor completion data",
    )
    parser.add_argument(
        "input", nargs="?", default="-",
        help="JSON file with a candidate or a list of candidates ('-' for stdin)",
    )
    parser.add_argument("--extra-space", action="store_true", help="Pad parameter lists: foo( int x )")
    parser.add_argument("--records", action="store_true", help="Print every record field instead of editor responses")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else Config.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.input == "-":
            candidates = _load_candidates(sys.stdin)
        else:
            with open(args.input, "r", encoding="utf-8") as f:
                candidates = _load_candidates(f)
    except OSError as e:
        logger.error("[CLI] Cannot read %s: %s", args.input, e)
        return 1
    except (json.JSONDecodeError, ValueError) as e:
        logger.error("[CLI] Invalid candidate input: %s", e)
        return 1

    builder = CompletionDataBuilder(extra_space=True if args.extra_space else None)
    records = builder.build_all(candidates)
    convert = record_to_dict if args.records else build_completion_response
    json.dump([convert(r) for r in records], sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
