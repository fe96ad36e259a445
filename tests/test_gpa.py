import pytest

import coursegrades


def test_compute_gpa_is_not_implemented():
    with pytest.raises(NotImplementedError):
        coursegrades.gpa.compute_gpa({"Algebra": 92.5})


def test_gpa_result_shape():
    result = coursegrades.gpa.GpaResult(unweighted=3.7, weighted=4.2)
    assert (result.unweighted, result.weighted) == (3.7, 4.2)
