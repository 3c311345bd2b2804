# src/string_tokenizer/demo.py
import argparse
import json
import sys

from string_tokenizer.constants import DEFAULT_DELIMITERS, DEMO_TEXT, TOKENIZER_TOPIC
from string_tokenizer.scanning import NoMoreTokens, Tokenizer
from string_tokenizer.types import TokenSource
from string_tokenizer.utils import debug, enable_topics


def _unescape(value: str) -> str:
    """Decode backslash escapes (\\t, \\f, \\uXXXX, ...) typed on the command line."""
    return value.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _drain(source: TokenSource, tokens: list[str]) -> list[str]:
    while source.has_more_tokens():
        tokens.append(source.next_token())
        debug(f"token #{len(tokens)}: {tokens[-1]!r}", TOKENIZER_TOPIC)
    return tokens


def main(argv: list[str] | None = None) -> None:
    """CLI demo: split text on delimiters and print the tokens as JSON."""
    parser = argparse.ArgumentParser(
        prog="string-tokenizer-demo",
        description="Split text into tokens separated by delimiter characters.",
    )
    parser.add_argument(
        "text",
        nargs="*",
        help="Text to tokenize, backslash escapes allowed (default: a tab/form-feed sample line)",
    )
    parser.add_argument(
        "--delims",
        default=None,
        help="Delimiter characters, backslash escapes allowed (default: ' \\t\\n\\r\\f')",
    )
    parser.add_argument(
        "--return-delims",
        action="store_true",
        dest="return_delims",
        help="Also return each delimiter as a one-character token",
    )
    parser.add_argument(
        "--switch",
        default=None,
        help="Switch to these delimiters after the first token",
    )
    parser.add_argument(
        "--count",
        action="store_true",
        help="Report the number of tokens before scanning",
    )
    parser.add_argument("--debug", action="store_true", help="Trace every token on stderr")

    args = parser.parse_args(argv)
    if args.debug:
        enable_topics(TOKENIZER_TOPIC)

    try:
        text = _unescape(" ".join(args.text)) if args.text else DEMO_TEXT
        delims = _unescape(args.delims) if args.delims is not None else DEFAULT_DELIMITERS
        tokenizer = Tokenizer(text, delims, args.return_delims)

        result: dict[str, object] = {}
        if args.count:
            result["count"] = tokenizer.count_remaining_tokens()

        tokens: list[str] = []
        if args.switch is not None and tokenizer.has_more_tokens():
            tokens.append(tokenizer.next_token())
            switch = _unescape(args.switch)
            debug(f"switching delimiters to {switch!r}", TOKENIZER_TOPIC)
            try:
                tokens.append(tokenizer.next_token(switch))
            except NoMoreTokens:
                debug("nothing left after the switch", TOKENIZER_TOPIC)
        result["tokens"] = _drain(tokenizer, tokens)

        print(json.dumps(result, indent=2, ensure_ascii=False))
    except (NoMoreTokens, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
