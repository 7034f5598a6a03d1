import numpy as np
import pytest
from fraction import Fraction


@pytest.fixture(params=[int, np.int64, np.int32], ids=["int", "int64", "int32"])
def rep(request):
    """Provide each integral representation the fraction is exercised over."""
    return request.param


@pytest.fixture
def frac(rep):
    """Build fractions whose fields carry the current representation."""
    def make(num, den=None):
        if den is None:
            return Fraction(rep(num))
        return Fraction(rep(num), rep(den))
    return make
