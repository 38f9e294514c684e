"""Command-line entry point: `squash <command> ...`."""
from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import Any

from squash.common.config import DEFAULT_CFG_PATH, load_cfg
from squash.common.exceptions import SquashError
from squash.common.logging_setup import setup_logging
from squash.common.schema import GenerateRequest, Unit
from squash.toolkit import Squash

LOGGER = logging.getLogger("squash.cli")


def _number(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="squash", description="Squash utility toolkit")
    ap.add_argument("--cfg", default=DEFAULT_CFG_PATH, help="Config path")
    ap.add_argument("--address", help="Ollama base URL (overrides config)")
    ap.add_argument("--log-level", help="Logging level (overrides config)")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("generate", help="Generate a completion")
    p.add_argument("--prompt", required=True)
    p.add_argument("--model")
    p.add_argument("--system")

    p = sub.add_parser("chat", help="Send a single user message")
    p.add_argument("--message", required=True)
    p.add_argument("--model")

    sub.add_parser("models", help="List installed models")

    p = sub.add_parser("show", help="Show model details")
    p.add_argument("name")

    p = sub.add_parser("pull", help="Pull a model")
    p.add_argument("name")
    p.add_argument("--insecure", action="store_true", default=None)

    p = sub.add_parser("embed", help="Generate embeddings")
    p.add_argument("--prompt", required=True)
    p.add_argument("--model")

    p = sub.add_parser("convert", help="Convert between byte units")
    p.add_argument("value", type=_number)
    p.add_argument("source")
    p.add_argument("target")
    p.add_argument("--binary", action="store_true", help="Use the 1024 scale")

    p = sub.add_parser("calc", help="Evaluate LEFT OP RIGHT")
    p.add_argument("left", type=_number)
    p.add_argument("operator")
    p.add_argument("right", type=_number)

    sub.add_parser("uuid", help="Print a v4 UUID")

    p = sub.add_parser("random", help="Print a random string")
    p.add_argument("--length", type=int, default=25)

    p = sub.add_parser("webhook", help="Post a message to a webhook")
    p.add_argument("--message", required=True)
    p.add_argument("--url")
    return ap


def run(args: argparse.Namespace, cfg: dict[str, Any], squash: Squash) -> Any:
    address = args.address or cfg["ollama_address"]
    model = getattr(args, "model", None) or cfg["model"]
    ollama = squash.ollama()

    if args.command == "generate":
        request = GenerateRequest(
            address=address,
            prompt=args.prompt,
            model=model,
            system=args.system,
            stay_alive=cfg["keep_alive"],
        )
        return ollama.generate(request).response
    if args.command == "chat":
        messages = [{"role": "user", "content": args.message}]
        reply = ollama.chat(model, address, messages, keep_alive=cfg["keep_alive"])
        return json.loads(reply.response or "null")
    if args.command == "models":
        return ollama.list_models(address)
    if args.command == "show":
        return ollama.show_model_info(address, args.name)
    if args.command == "pull":
        return ollama.pull_model(address, args.name, args.insecure)
    if args.command == "embed":
        return ollama.generate_embeddings(address, model, args.prompt, keep_alive=cfg["keep_alive"])
    if args.command == "convert":
        unit = Unit(args.value, args.source)
        if args.binary:
            result = squash.convert_bibytes(unit, args.target)
        else:
            result = squash.convert_bytes(unit, args.target)
        return f"{result.value} {result.unit}"
    if args.command == "calc":
        return squash.calculate(args.left, args.operator, args.right)
    if args.command == "uuid":
        return squash.uuid()
    if args.command == "random":
        return squash.generate_random_string(args.length)
    if args.command == "webhook":
        url = args.url or cfg["webhook_url"]
        if not url:
            raise SquashError("No webhook URL given (--url or webhook_url in config)")
        return squash.webhook().send_message(args.message, url)
    raise SquashError(f"Unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = load_cfg(args.cfg)
    setup_logging(args.log_level or cfg["log_level"])

    squash = Squash.create(timeout=cfg["timeout"])
    try:
        out = run(args, cfg, squash)
    except SquashError as e:
        LOGGER.error("%s failed: %s", args.command, e)
        print(str(e), file=sys.stderr)
        return 1

    if isinstance(out, (dict, list)):
        print(json.dumps(out, indent=2))
    else:
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
