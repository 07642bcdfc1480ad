import pytest

from readability_score.algorithms import Algorithm, is_all_choice, resolve_algorithms
from readability_score.errors import UnknownAlgorithmError


def test_algorithm_descriptions():
    assert Algorithm.ARI.description == "Automated Readability Index"
    assert Algorithm.FK.description == "Flesch–Kincaid readability tests"
    assert Algorithm.SMOG.description == "Simple Measure of Gobbledygook"
    assert Algorithm.CL.description == "Coleman-Liau index"


@pytest.mark.parametrize("name", ["ARI", "ari", " Ari "])
def test_from_name_ignores_case_and_whitespace(name: str):
    assert Algorithm.from_name(name) is Algorithm.ARI


def test_from_name_rejects_unknown():
    with pytest.raises(UnknownAlgorithmError) as excinfo:
        Algorithm.from_name("xyz")
    assert excinfo.value.name == "xyz"


def test_from_name_does_not_accept_all():
    with pytest.raises(UnknownAlgorithmError):
        Algorithm.from_name("all")


def test_resolve_algorithms():
    assert resolve_algorithms("ALL") == [
        Algorithm.ARI,
        Algorithm.FK,
        Algorithm.SMOG,
        Algorithm.CL,
    ]
    assert resolve_algorithms("smog") == [Algorithm.SMOG]
    assert resolve_algorithms(Algorithm.CL) == [Algorithm.CL]
    assert is_all_choice("All")
    assert not is_all_choice(Algorithm.ARI)
