"""Command that walks through the generator's features."""

from __future__ import annotations

from collections.abc import Sequence

from doremid.generator import Config, Generator, new_with_defaults

__all__ = ["format_number", "main"]


def format_number(n: int) -> str:
    """Format ``n`` with thousands separators."""
    if n < 1000:
        return str(n)
    return f"{n:,}"


def _format_list(items: Sequence[str]) -> str:
    return "[" + " ".join(items) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a tour of random, sequential and positional ID generation."""
    generator = Generator(Config(4, 5, "-"))

    print(f"Random ID: {generator.new_id()}")

    random_ids = generator.batch_generate_random_ids(3)
    print(f"Unique random batch IDs: {_format_list(random_ids)}")

    larger_batch = generator.batch_generate_random_ids(10)
    print(f"Larger unique batch ({len(larger_batch)} IDs): {_format_list(larger_batch)}")

    batch_ids = generator.batch_generate_ids(3, 0)
    print(f"Sequential batch IDs: {_format_list(batch_ids)}")

    position = generator.id_to_position(batch_ids[0])
    print(f"ID '{batch_ids[0]}' position: {position}")

    converted = generator.position_to_id(position)
    print(f"Position {position} to ID: {converted}")

    print(f"Max combinations: {format_number(generator.max_combinations())}")

    print(f"Default config ID: {new_with_defaults().new_id()}")

    small = Generator(Config(1, 2, "-"))
    print(f"Small config ID: {small.new_id()}")
    print(f"Small config max combinations: {small.max_combinations()}")

    limited = small.batch_generate_ids(10, 80)
    print(f"Limited batch generation: {len(limited)} IDs")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())