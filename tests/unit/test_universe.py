"""Tests for the relation algebra."""

import numpy as np
import pytest

from logic_algebra.core import Boolean, BitVectorAlg, GenVec
from logic_algebra.errors import ShapeMismatchError
from logic_algebra.relation import BinaryRelAlg, Universe
from logic_algebra.tensor import DenseTensorAlg, LiftedTensorAlg, Shape
from logic_algebra.utils import to_signed

SIZE = 4


def make_universe(kind, size=SIZE):
    if kind == "dense":
        return Universe(DenseTensorAlg("cpu"), size)
    return Universe(LiftedTensorAlg(Boolean()), size)


def relation(universe, pairs):
    """Binary relation containing exactly the given pairs."""
    pairs = set(pairs)
    return universe.alg.tensor_create(universe.new_shape(2), lambda c: c in pairs)


def pairs_of(universe, elem):
    """The set of pairs in a concrete relation."""
    values = elem.tolist()
    return {
        (i, j)
        for i in range(universe.size)
        for j in range(universe.size)
        if values[i][j]
    }


def random_relations(universe, count, seed=0):
    rng = np.random.default_rng(seed)
    result = []
    for _ in range(count):
        data = rng.random((universe.size, universe.size)) < 0.35
        result.append(universe.alg.tensor_create(universe.new_shape(2), lambda c: data[c]))
    return result


@pytest.fixture(params=["dense", "lifted"])
def universe(request):
    return make_universe(request.param)


class TestShapePredicates:
    """Scalar / relation / binary relation recognition."""

    def test_predicates(self, universe):
        """Each predicate accepts exactly its shapes."""
        scalar = universe.bool_lift(True)
        binary = universe.binrel_empty()
        ternary = universe.rel_lift(3, False)
        assert universe.is_scalar(scalar)
        assert not universe.is_scalar(binary)
        assert universe.is_binary_rel(binary)
        assert not universe.is_binary_rel(ternary)
        assert universe.is_relation(ternary)

    def test_negative_size_rejected(self):
        """A universe cannot have negative size."""
        with pytest.raises(ValueError):
            Universe(DenseTensorAlg("cpu"), -1)


class TestBinaryRelations:
    """Binary relation operations on concrete relations."""

    def test_lift(self, universe):
        """Empty and total relations."""
        assert pairs_of(universe, universe.binrel_empty()) == set()
        assert len(pairs_of(universe, universe.binrel_total())) == SIZE * SIZE

    def test_diag(self, universe):
        """diag holds exactly on equal coordinates."""
        assert pairs_of(universe, universe.binrel_diag()) == {(i, i) for i in range(SIZE)}

    def test_comp_meet_join(self, universe):
        """Pointwise set operations."""
        r = relation(universe, [(0, 1), (1, 2)])
        s = relation(universe, [(1, 2), (3, 3)])
        assert pairs_of(universe, universe.binrel_meet(r, s)) == {(1, 2)}
        assert pairs_of(universe, universe.binrel_join(r, s)) == {(0, 1), (1, 2), (3, 3)}
        assert len(pairs_of(universe, universe.binrel_comp(r))) == SIZE * SIZE - 2

    def test_inv(self, universe):
        """inv swaps the coordinates."""
        r = relation(universe, [(0, 1), (2, 3), (3, 3)])
        assert pairs_of(universe, universe.binrel_inv(r)) == {(1, 0), (3, 2), (3, 3)}

    def test_circ(self, universe):
        """(R circ S)(x, z) iff R(x, y) and S(y, z) for some y."""
        r = relation(universe, [(0, 1), (1, 2), (2, 2)])
        s = relation(universe, [(1, 3), (2, 0)])
        assert pairs_of(universe, universe.binrel_circ(r, s)) == {(0, 3), (1, 0), (2, 0)}

    def test_circ_is_not_commutative(self, universe):
        """Composition order matters."""
        r = relation(universe, [(0, 1)])
        s = relation(universe, [(1, 2)])
        assert pairs_of(universe, universe.binrel_circ(r, s)) == {(0, 2)}
        assert pairs_of(universe, universe.binrel_circ(s, r)) == set()

    def test_equals_and_leq_return_scalars(self, universe):
        """Relation predicates return elements of the scalar logic."""
        r = relation(universe, [(0, 1)])
        s = relation(universe, [(0, 1), (1, 1)])
        assert universe.is_scalar(universe.binrel_equals(r, s))
        assert not universe.truth_value(universe.binrel_equals(r, s))
        assert universe.truth_value(universe.binrel_equals(r, r))
        assert bool(universe.binrel_leq(r, s))
        assert not bool(universe.binrel_leq(s, r))


class TestRelationLaws:
    """Relation-algebra laws on random relations."""

    def test_inv_diag(self, universe):
        """inv(diag) == diag."""
        diag = universe.binrel_diag()
        assert universe.truth_value(universe.binrel_equals(universe.binrel_inv(diag), diag))

    def test_double_complement(self, universe):
        """comp(comp(R)) == R."""
        for r in random_relations(universe, 5):
            assert universe.truth_value(universe.binrel_equals(universe.binrel_comp(universe.binrel_comp(r)), r))

    def test_join_agrees_with_de_morgan(self, universe):
        """The direct join equals the De Morgan default."""
        r, s = random_relations(universe, 2, seed=1)
        direct = universe.binrel_join(r, s)
        derived = BinaryRelAlg.binrel_join(universe, r, s)
        assert universe.truth_value(universe.binrel_equals(direct, derived))

    def test_circ_associative(self, universe):
        """circ(circ(R, S), T) == circ(R, circ(S, T))."""
        r, s, t = random_relations(universe, 3, seed=2)
        left = universe.binrel_circ(universe.binrel_circ(r, s), t)
        right = universe.binrel_circ(r, universe.binrel_circ(s, t))
        assert universe.truth_value(universe.binrel_equals(left, right))

    def test_diag_is_unit(self, universe):
        """circ(R, diag) == R == circ(diag, R)."""
        diag = universe.binrel_diag()
        for r in random_relations(universe, 3, seed=3):
            assert universe.truth_value(universe.binrel_equals(universe.binrel_circ(r, diag), r))
            assert universe.truth_value(universe.binrel_equals(universe.binrel_circ(diag, r), r))

    def test_inv_reverses_circ(self, universe):
        """inv(circ(R, S)) == circ(inv(S), inv(R))."""
        r, s = random_relations(universe, 2, seed=4)
        left = universe.binrel_inv(universe.binrel_circ(r, s))
        right = universe.binrel_circ(universe.binrel_inv(s), universe.binrel_inv(r))
        assert universe.truth_value(universe.binrel_equals(left, right))

    def test_backends_agree(self):
        """Dense and lifted universes compute the same compositions."""
        dense = make_universe("dense")
        lifted = make_universe("lifted")
        pairs_r = [(0, 1), (1, 1), (2, 3), (3, 0)]
        pairs_s = [(1, 2), (0, 0), (3, 3)]
        result_dense = dense.binrel_circ(relation(dense, pairs_r), relation(dense, pairs_s))
        result_lifted = lifted.binrel_circ(relation(lifted, pairs_r), relation(lifted, pairs_s))
        assert pairs_of(dense, result_dense) == pairs_of(lifted, result_lifted)


class TestShapeValidation:
    """Every relation operation fails fast on malformed shapes."""

    MALFORMED = [[SIZE], [SIZE, SIZE + 1], [SIZE + 1, SIZE + 1], [SIZE, SIZE, SIZE], []]

    @pytest.mark.parametrize("sizes", MALFORMED)
    @pytest.mark.parametrize(
        "op",
        [
            lambda u, x, ok: u.binrel_comp(x),
            lambda u, x, ok: u.binrel_inv(x),
            lambda u, x, ok: u.binrel_meet(x, ok),
            lambda u, x, ok: u.binrel_meet(ok, x),
            lambda u, x, ok: u.binrel_join(x, ok),
            lambda u, x, ok: u.binrel_join(ok, x),
            lambda u, x, ok: u.binrel_circ(x, ok),
            lambda u, x, ok: u.binrel_circ(ok, x),
            lambda u, x, ok: u.binrel_equals(ok, x),
            lambda u, x, ok: u.binrel_leq(x, ok),
        ],
    )
    def test_malformed_binary_relation(self, universe, sizes, op):
        """Non-square or wrong-rank operands are rejected."""
        bad = universe.alg.tensor_create(Shape(sizes), lambda _: True)
        good = universe.binrel_total()
        with pytest.raises(ShapeMismatchError):
            op(universe, bad, good)

    @pytest.mark.parametrize("sizes", [[1], [SIZE, SIZE], [1, 1]])
    def test_malformed_scalar(self, universe, sizes):
        """Scalar operations reject tensors of positive rank."""
        bad = universe.alg.tensor_create(Shape(sizes), lambda _: True)
        good = universe.bool_lift(True)
        with pytest.raises(ShapeMismatchError):
            universe.bool_not(bad)
        with pytest.raises(ShapeMismatchError):
            universe.bool_and(good, bad)
        with pytest.raises(ShapeMismatchError):
            universe.bool_or(bad, good)

    def test_error_reports_shapes(self, universe):
        """The exception carries the expected and actual shapes."""
        bad = universe.alg.tensor_create(Shape([SIZE, 2]), lambda _: True)
        with pytest.raises(ShapeMismatchError) as exc_info:
            universe.binrel_inv(bad)
        assert exc_info.value.expected == Shape([SIZE, SIZE])
        assert exc_info.value.actual == Shape([SIZE, 2])


class TestEmptyUniverse:
    """Size 0 gives degenerate but valid shapes."""

    @pytest.mark.parametrize("kind", ["dense", "lifted"])
    def test_operations_on_empty_universe(self, kind):
        """All operations still validate and produce empty relations."""
        empty = make_universe(kind, 0)
        r = empty.binrel_total()
        assert empty.alg.shape(r) == Shape([0, 0])
        for result in (
            empty.binrel_comp(r),
            empty.binrel_inv(r),
            empty.binrel_meet(r, r),
            empty.binrel_join(r, r),
            empty.binrel_circ(r, empty.binrel_diag()),
        ):
            assert empty.alg.shape(result) == Shape([0, 0])
        assert empty.truth_value(empty.binrel_equals(r, empty.binrel_empty()))

    def test_empty_universe_still_validates(self):
        """A 1x1 tensor is not a relation over the empty universe."""
        empty = make_universe("dense", 0)
        bad = empty.alg.tensor_create(Shape([1, 1]), lambda _: True)
        with pytest.raises(ShapeMismatchError):
            empty.binrel_comp(bad)


class TestScalarFront:
    """The universe as a Boolean algebra of rank-0 tensors."""

    def test_scalar_operations(self, universe):
        """Scalar operations follow the truth tables."""
        t = universe.bool_lift(True)
        f = universe.bool_lift(False)
        assert bool(universe.bool_or(t, f))
        assert not bool(universe.bool_and(t, f))
        assert bool(universe.bool_xor(t, f))
        assert not bool(universe.bool_equ(t, f))
        assert not bool(universe.bool_imp(t, f))
        assert bool(universe.bool_not(f))
        assert bool(universe.bool_maj(t, t, f))

    def test_truth_value(self, universe):
        """Concrete scalars convert to Python bools; relations do not."""
        assert universe.truth_value(universe.bool_lift(True)) is True
        assert universe.truth_value(universe.bool_lift(False)) is False
        with pytest.raises(ShapeMismatchError):
            universe.truth_value(universe.binrel_total())

    def test_bit_vector_arithmetic_over_scalars(self, universe):
        """Two's-complement arithmetic runs unchanged on rank-0 tensors."""
        vec = BitVectorAlg(universe)
        a = vec.num_lift(8, 17)
        b = vec.num_lift(8, 73)

        def value(v):
            return to_signed(bool(bit) for bit in v)

        assert isinstance(a, GenVec)
        assert all(universe.is_scalar(bit) for bit in a)
        assert value(vec.num_add(a, b)) == 90
        assert value(vec.num_sub(a, b)) == -56
        assert value(vec.num_neg(a)) == -17


class TestNaryRelations:
    """Relations of arbitrary arity."""

    def test_exists_projects_first_coordinate(self, universe):
        """rel_exists(R)(y, z) iff R(x, y, z) for some x."""
        triples = {(0, 1, 2), (3, 1, 2), (2, 0, 0)}
        r = universe.alg.tensor_create(universe.new_shape(3), lambda c: c in triples)
        projected = universe.rel_exists(r)
        assert pairs_of(universe, projected) == {(1, 2), (0, 0)}

    def test_polymer_builds_ternary_from_binary(self, universe):
        """rel_polymer(R, 3, [0, 2])(x, y, z) == R(x, z)."""
        r = relation(universe, [(1, 3)])
        lifted = universe.rel_polymer(r, 3, [0, 2])
        projected = universe.rel_exists(universe.rel_polymer(lifted, 3, [1, 0, 2]))
        assert pairs_of(universe, projected) == {(1, 3)}

    def test_nary_set_operations(self, universe):
        """comp/meet/join work at any arity."""
        r = universe.rel_lift(3, True)
        s = universe.rel_comp(r)
        assert universe.alg.shape(universe.rel_meet(r, s)) == universe.new_shape(3)
        joined = universe.rel_join(r, s)
        assert universe.alg.shape(joined) == universe.new_shape(3)

    def test_arity_mismatch(self, universe):
        """Relations of different arities cannot be combined."""
        with pytest.raises(ShapeMismatchError) as exc_info:
            universe.rel_meet(universe.rel_lift(2, True), universe.rel_lift(3, True))
        assert exc_info.value.expected == universe.new_shape(2)
        assert exc_info.value.actual == universe.new_shape(3)

    def test_non_rectangular_reports_shapes(self, universe):
        """A ragged tensor is reported against the rectangular shape of its rank."""
        bad = universe.alg.tensor_create(Shape([SIZE, SIZE, 1]), lambda _: True)
        with pytest.raises(ShapeMismatchError) as exc_info:
            universe.rel_comp(bad)
        assert exc_info.value.expected == universe.new_shape(3)
        assert exc_info.value.actual == Shape([SIZE, SIZE, 1])

    def test_nullary_cannot_be_projected(self, universe):
        """A nullary relation has no coordinate to project."""
        with pytest.raises(ShapeMismatchError):
            universe.rel_exists(universe.rel_lift(0, True))
