import math

import pytest

from src.domain.errors import InvalidInputError
from src.domain.services.vector_math import as_vector, cosine_similarity, dot, magnitude


def test_dot_product():
    assert dot([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]) == pytest.approx(12.0)


def test_dot_rejects_mismatched_lengths():
    with pytest.raises(InvalidInputError):
        dot([1.0, 2.0], [1.0, 2.0, 3.0])


def test_magnitude():
    assert magnitude([3.0, 4.0]) == pytest.approx(5.0)
    assert magnitude([0.0, 0.0, 0.0]) == 0.0
    assert magnitude([-3.0, -4.0]) == pytest.approx(5.0)


@pytest.mark.parametrize(
    "v",
    [[1.0, 0.0], [0.85, 0.15, 0.05], [-2.5, 7.0, 0.001], [1e-6, 3e-6]],
)
def test_cosine_of_vector_with_itself_is_one(v):
    assert cosine_similarity(v, v) == pytest.approx(1.0)


@pytest.mark.parametrize("v", [[1.0, 2.0, 3.0], [-1.0, 0.5, 0.0], [0.0, 0.0, 0.0]])
def test_zero_vector_has_zero_similarity(v):
    zero = [0.0, 0.0, 0.0]
    assert cosine_similarity(zero, v) == 0.0
    assert cosine_similarity(v, zero) == 0.0


def test_cosine_is_symmetric():
    a = [0.1, 0.8, 0.2]
    b = [0.9, -0.1, 0.1]
    assert cosine_similarity(a, b) == cosine_similarity(b, a)


def test_cosine_allows_negative_values():
    assert cosine_similarity([1.0, 0.0], [-1.0, 0.0]) == pytest.approx(-1.0)
    assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)


def test_cosine_ignores_magnitude():
    assert cosine_similarity([1.0, 2.0], [10.0, 20.0]) == pytest.approx(1.0)


def test_cosine_matches_formula():
    a = [0.85, 0.15, 0.05]
    b = [0.9, 0.1, 0.1]
    expected = 0.785 / (math.sqrt(0.7475) * math.sqrt(0.83))
    assert cosine_similarity(a, b) == pytest.approx(expected)


def test_results_are_python_floats():
    assert type(dot([1, 2], [3, 4])) is float
    assert type(magnitude([3, 4])) is float
    assert type(cosine_similarity([1, 0], [1, 1])) is float


def test_as_vector_returns_float_array():
    vector = as_vector([1, 2, 3])
    assert vector.dtype == float
    assert vector.tolist() == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("values", [[float("nan")], [1.0, float("inf")], ["x"], [[1.0], [2.0]]])
def test_as_vector_rejects_invalid_components(values):
    with pytest.raises(InvalidInputError):
        as_vector(values)
