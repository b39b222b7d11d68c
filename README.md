# doremid

Human-friendly identifiers built from solfège syllables and a base-12 suffix,
for example `solatido-3a0b9`.

An ID has two parts joined by a separator:

- a *just intonation* part: a number of note syllables, each one of
  `do re mi fa so la ti`;
- an *equal temperament* part: a number of characters from `0123456789ab`.

Every ID corresponds to a position in a fixed sequential order, so IDs can be
produced randomly, in sequence, or converted to and from integer positions.

## Installation

```
pip install .
```

## Usage

```python
from doremid.generator import Config, Generator, default_config, new_with_defaults

gen = Generator(Config(just_intonation_digits=1, equal_temperament_digits=2, separator="-"))

gen.new_id()                        # random ID, e.g. 'la-7b'
gen.max_combinations()              # 7 * 12**2 == 1008
gen.batch_generate_ids(3, 0)        # ['do-00', 'do-01', 'do-02']
gen.batch_generate_random_ids(5)    # five distinct random IDs
gen.position_to_id(144)             # 're-00'
gen.id_to_position("do-01")         # 1
gen.random_sample(10, 3)            # three distinct integers from range(10)

default_gen = new_with_defaults()   # 4 notes, 5 characters, '-' separator
default_gen.new_id()                # e.g. 'doremifa-0a3b1'
```

`Config` is a frozen dataclass whose defaults (4 notes, 5 characters, `-`)
are also what `default_config()` returns; `Generator()` with no argument uses
them as well.

Behaviour worth knowing:

- `batch_generate_ids(count, start_position)` stops at the last valid
  position; it returns an empty list for a non-positive count, a negative
  start, or a start at or past `max_combinations()`.
- `batch_generate_random_ids(count)` returns distinct IDs, or an empty list if
  `count` is not positive or exceeds `max_combinations()`.
- `random_sample(limit, count)` returns the whole of `range(limit)` shuffled
  when `count` reaches `limit`.
- `position_to_id` raises `ValueError` for a negative position.
- `id_to_position` raises `ValueError` for a malformed ID: wrong number of
  parts, wrong part lengths, or an unknown syllable or character. It also
  raises `ValueError` when the generator's separator is empty, since such IDs
  cannot be split.

## Demo

A short walk through the API is installed as a command:

```
doremid-demo
```

It prints a random ID, random and sequential batches, a position round trip,
the number of possible IDs, and the results for a small configuration. It
takes no options.