from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional

from .config import load_settings
from .errors import LottoError
from .messages import purchased_label, user_message
from .services.engine import LottoEngine
from .services.random_source import RandomNumberSource
from .types import TICKET_SIZE, Rank, RankResult


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )


def parse_numbers(raw: str) -> List[int]:
    try:
        return [int(part) for part in raw.split(",") if part.strip()]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number list: {raw!r}") from exc


def format_result(result: RankResult) -> str:
    lines = []
    for rank in Rank.ranked():
        bonus = " + bonus" if rank.bonus else ""
        lines.append(
            f"{rank.label:>6}: {rank.match_count} matches{bonus} "
            f"({result.payouts.get(rank, 0):,}) - {result.count(rank)}"
        )
    lines.append(f"unranked: {result.unranked}")
    lines.append(f"benefit rate: {result.benefit_rate:.2f}%")
    return "\n".join(lines)


def simulate(args: argparse.Namespace) -> int:
    if args.numbers is None and args.bonus is not None:
        raise SystemExit("--numbers is required with --bonus")
    if args.numbers is not None:
        if args.bonus is None:
            raise SystemExit("--bonus is required with --numbers")
        if len(args.numbers) != TICKET_SIZE:
            raise SystemExit(f"--numbers needs exactly {TICKET_SIZE} values")

    settings = load_settings(args.env_file).lotto
    logger = logging.getLogger("luckylotto.cli")
    rng = random.Random(args.seed) if args.seed is not None else None
    source = RandomNumberSource(rng)
    engine = LottoEngine(settings, source=source)

    try:
        tickets = engine.purchase(args.amount)
        print(purchased_label(engine.purchased_count))
        if args.show_tickets:
            for ticket in tickets:
                print(", ".join(str(n) for n in ticket.numbers))

        if args.numbers is None:
            drawn = source.draw_unique(TICKET_SIZE + 1, 1, settings.max_number)
            base, bonus = drawn[:TICKET_SIZE], drawn[TICKET_SIZE]
            logger.info("Drew winning numbers %s + bonus %s", sorted(base), bonus)
        else:
            base, bonus = args.numbers, args.bonus

        engine.submit_answer(base, bonus)
        print(format_result(engine.calc_benefit()))
    except LottoError as exc:
        logger.debug("Simulation stopped: %s", exc)
        print(user_message(exc))
        return 1
    return 0


def serve(args: argparse.Namespace) -> int:
    from .app import create_app

    settings = load_settings(args.env_file)
    app = create_app(settings)
    app.run(host=args.host, port=args.port, debug=settings.flask.debug)
    return 0


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Lucky lotto simulator")
    parser.add_argument("--env-file", type=str, default=None, help="Path to .env file with settings")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging (default INFO)."
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    sim = subparsers.add_parser("simulate", help="Buy tickets and check them against an answer.")
    sim.add_argument("--amount", type=int, required=True, help="Money to spend on tickets.")
    sim.add_argument("--numbers", type=parse_numbers, default=None, help="Winning numbers, e.g. 1,2,3,4,5,6")
    sim.add_argument("--bonus", type=int, default=None, help="Bonus number.")
    sim.add_argument("--seed", type=int, default=None, help="Seed for reproducible tickets.")
    sim.add_argument("--show-tickets", action="store_true", help="Print every purchased ticket.")
    sim.set_defaults(handler=simulate)

    srv = subparsers.add_parser("serve", help="Run the HTTP API.")
    srv.add_argument("--host", default="127.0.0.1")
    srv.add_argument("--port", type=int, default=5000)
    srv.set_defaults(handler=serve)

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        sys.exit(args.handler(args))
    except KeyboardInterrupt:
        print("Stopped by user.")


if __name__ == "__main__":
    main()
