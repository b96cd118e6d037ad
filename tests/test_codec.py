import pytest

from artmaker.core.errors import OutOfRange
from artmaker.core.rng import make_rng
from artmaker.genetics.codec import (
    decode,
    expected_length,
    express,
    find_pivot,
    generate_genome,
    layout,
    random_digits,
    validate_genome,
)
from artmaker.genetics.phenotype import DrawInstruction, ScalarValue
from artmaker.genetics.proteins import Protein, ProteinSchema, rgb

SAMPLE_BOUNDARIES = [0, 2, 4, 13, 14, 25, 26, 31, 36]


def _walk_length(genome: str, schema) -> int:
    offset = 0
    for protein in schema:
        if protein.repeating:
            offset += 1 + int(genome[offset]) * protein.size
        else:
            offset += protein.size
    return offset


def test_random_digits_alphabet_and_length(rng):
    digits = random_digits(500, rng)
    assert len(digits) == 500
    assert set(digits) <= set("0123456789")
    assert random_digits(0, rng) == ""


@pytest.mark.parametrize("seed", range(20))
def test_generated_genome_matches_its_layout(schema, seed):
    genome = generate_genome(schema, make_rng(seed))
    assert len(genome) == _walk_length(genome, schema)
    assert schema.fixed_length <= len(genome) <= schema.max_length
    assert validate_genome(genome, schema) == genome


def test_generation_is_seeded(schema):
    assert generate_genome(schema, make_rng(7)) == generate_genome(schema, make_rng(7))


def test_layout_segments_are_contiguous(schema, sample_genome):
    segments = layout(sample_genome, schema)
    assert segments[0].start == 0
    for prev, cur in zip(segments, segments[1:]):
        assert prev.end == cur.start
    assert [s.end for s in segments] == SAMPLE_BOUNDARIES
    controls = [s for s in segments if s.is_control]
    assert [(s.protein.name, s.siblings) for s in controls] == [("ellipse", 1), ("linegrid", 2)]


@pytest.mark.parametrize(
    "target,pivot",
    [(0, 0), (1, 2), (2, 2), (3, 4), (5, 13), (13, 13), (14, 14), (15, 25), (26, 26), (27, 31), (32, 36), (36, 36)],
)
def test_find_pivot_snaps_to_boundaries(schema, sample_genome, target, pivot):
    assert find_pivot(sample_genome, target, schema) == pivot


@pytest.mark.parametrize("target", [-1, 37, 100])
def test_find_pivot_out_of_range(schema, sample_genome, target):
    with pytest.raises(OutOfRange):
        find_pivot(sample_genome, target, schema)


@pytest.mark.parametrize("seed", range(5))
def test_find_pivot_is_monotonic(schema, seed):
    genome = generate_genome(schema, make_rng(seed))
    pivots = [find_pivot(genome, i, schema) for i in range(len(genome) + 1)]
    assert pivots == sorted(pivots)
    assert all(p >= i for i, p in enumerate(pivots))
    assert pivots[-1] == len(genome)


def test_pivot_accepts_surplus_tail(schema, sample_genome):
    genome = sample_genome + "777"
    assert find_pivot(genome, 37, schema) == 39


def test_decode_sample(schema, sample_genome):
    values = list(decode(sample_genome, schema))
    scalars = {v.name: v for v in values if isinstance(v, ScalarValue)}
    assert scalars["drawing"].value == "12"
    assert scalars["frame_rate"].value == 10.0
    assert scalars["background"].value == pytest.approx((255.0, 0.0, 500 / 999 * 255))

    draws = [v for v in values if isinstance(v, DrawInstruction)]
    assert [d.shape for d in draws] == ["ellipse", "rays", "rays"]
    ellipse = draws[0]
    assert ellipse.params["radius"] == 10
    assert ellipse.params["fill"] == pytest.approx((255.0, 0.0, 255.0))
    assert [d.params["angle_step"] for d in draws[1:]] == [30, 45]
    assert [d.index for d in draws[1:]] == [0, 1]
    assert all(d.siblings == 2 for d in draws[1:])


def test_decode_is_restartable(schema):
    genome = generate_genome(schema, make_rng(3))
    decoded = decode(genome, schema)
    assert list(decoded) == list(decoded)
    assert list(decoded) == list(decode(genome, schema))


def test_decode_passes_offsets():
    seen = []

    def record(payload, index, siblings, offset):
        seen.append((payload, index, siblings, offset))
        return None

    schema = ProteinSchema([Protein("head", 0, 1), Protein("body", 1, 2, repeating=True, drawable=True, decode=record)])
    assert list(decode("9" + "3" + "112233", schema)) == [ScalarValue("head", "9", "9")]
    assert seen == [("11", 0, 3, 2), ("22", 1, 3, 4), ("33", 2, 3, 6)]


def test_rgb_scenario():
    schema = ProteinSchema([Protein("red", 0, 3, decode=lambda p, i, s, o: ScalarValue("red", rgb(p, 0), p))])
    genome = generate_genome(schema, make_rng(11))
    assert len(genome) == 3
    (value,) = list(decode(genome, schema))
    assert value.value == pytest.approx(int(genome) / 999 * 255)


def test_express_folds_setup(schema, sample_genome, short_genome):
    phenotype = express(sample_genome, schema)
    assert phenotype.setup.frame_rate == 10.0
    assert phenotype.setup.animated is True
    assert len(phenotype.instructions) == 3

    still = express(short_genome, schema)
    assert still.setup.animated is False
    assert still.setup.background == (0.0, 0.0, 0.0)
    assert still.as_dict()["instructions"] == [
        {"shape": "rays", "index": 0, "siblings": 1, "angle_step": 45, "count": 8.0}
    ]


def test_validate_genome_rejects_malformed(schema, sample_genome):
    with pytest.raises(OutOfRange):
        validate_genome(sample_genome[:-1], schema)
    with pytest.raises(OutOfRange):
        validate_genome(sample_genome + "0", schema)
    with pytest.raises(OutOfRange):
        validate_genome(sample_genome[:-1] + "x", schema)


def test_decode_tolerates_truncated_genome(schema, sample_genome):
    truncated = sample_genome[:30]
    assert expected_length(truncated, schema) == 36
    shapes = [v.shape for v in decode(truncated, schema) if isinstance(v, DrawInstruction)]
    assert shapes == ["ellipse"]
