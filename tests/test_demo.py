import pytest

from doremid.demo import format_number, main
from doremid.generator import Config, Generator


@pytest.mark.parametrize("n", [0, 7, 84, 999])
def test_format_number_small_is_plain(n):
    assert format_number(n) == str(n)


def test_format_number_thousands():
    assert format_number(1000) == "1,000"


def test_format_number_default_combinations():
    assert format_number(597394032) == "597,394,032"


def test_format_number_strips_to_original():
    for n in (1234, 98765, 1234567890):
        assert int(format_number(n).replace(",", "")) == n


def _lines(capsys):
    assert main() == 0
    return capsys.readouterr().out.splitlines()


def test_main_random_id_is_valid(capsys):
    lines = _lines(capsys)
    random_line = next(line for line in lines if line.startswith("Random ID: "))
    generator = Generator(Config(4, 5, "-"))
    pos = generator.id_to_position(random_line.removeprefix("Random ID: "))
    assert 0 <= pos < generator.max_combinations()


def test_main_sequential_round_trip(capsys):
    lines = _lines(capsys)
    generator = Generator(Config(4, 5, "-"))
    seq_line = next(line for line in lines if line.startswith("Sequential batch IDs: "))
    ids = seq_line.removeprefix("Sequential batch IDs: ").strip("[]").split(" ")
    assert ids == generator.batch_generate_ids(3, 0)
    assert f"ID '{ids[0]}' position: 0" in lines
    assert f"Position 0 to ID: {ids[0]}" in lines


def test_main_larger_batch_is_unique(capsys):
    lines = _lines(capsys)
    line = next(item for item in lines if item.startswith("Larger unique batch (10 IDs): "))
    ids = line.split(": ", 1)[1].strip("[]").split(" ")
    assert len(set(ids)) == 10