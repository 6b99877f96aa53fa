import numpy as np
import pytest

from rag_embeddings import (
    DynamicEmbedding,
    Embedding,
    EmptyInputError,
    MAX_DIMENSION,
    NegativeIndexError,
    NonNumericElementError,
    ZeroVectorError,
    create,
    create_empty,
)
from rag_embeddings.embedding import DEFAULT_POLICY, get_embedding_class


# ============== Tests ==============

class TestDynamicEmbedding:
    """Tests for the growable construction policy."""

    def test_empty_embedding(self):
        """Test the zero-length starting state."""
        emb = DynamicEmbedding.empty()
        assert emb.dim == 0
        assert emb.to_list() == []
        assert emb.get(0) is None
        assert emb.magnitude() == 0.0

    def test_set_grows_and_zero_fills(self):
        """Test that writing past the end zero-fills the gap."""
        emb = DynamicEmbedding.empty()
        emb.set(3, 2.5)
        assert emb.dim == 4
        assert emb.to_list() == [0.0, 0.0, 0.0, 2.5]

        emb.set(1, 7)
        assert emb.to_list() == [0.0, 7.0, 0.0, 2.5]

    def test_set_keeps_dtype(self):
        """Test that growth preserves the storage dtype."""
        emb = DynamicEmbedding.from_array([1.0], dtype="float64")
        emb.set(4, 0.1)
        assert emb.dtype == np.float64
        assert emb.get(4) == 0.1

    def test_negative_index_rejected(self):
        """Test that negative writes fail without changes."""
        emb = DynamicEmbedding.from_array([1.0, 2.0])
        with pytest.raises(NegativeIndexError) as exc_info:
            emb.set(-1, 5.0)
        assert exc_info.value.index == -1
        assert emb.to_list() == [1.0, 2.0]

    def test_negative_get_returns_none(self):
        """Test that reads keep the safe-indexing contract."""
        emb = DynamicEmbedding.from_array([1.0, 2.0])
        assert emb.get(-1) is None
        assert emb.get(2) is None

    def test_invalid_value_does_not_grow(self):
        """Test that value validation happens before growing."""
        emb = DynamicEmbedding.from_array([1.0])
        with pytest.raises(NonNumericElementError) as exc_info:
            emb.set(10, "nope")
        assert exc_info.value.index == 10
        assert emb.dim == 1

    def test_no_dimension_ceiling(self):
        """Test that the strict ceiling does not apply."""
        emb = DynamicEmbedding.from_array([0.0] * (MAX_DIMENSION + 1))
        assert emb.dim == MAX_DIMENSION + 1

    def test_empty_vectors_compare_neutrally(self):
        """Test math on zero-length vectors."""
        a = DynamicEmbedding.empty()
        b = DynamicEmbedding.empty()
        assert a.cosine_similarity(b) == 0.0
        assert a.dot(b) == 0.0
        assert a.distance(b) == 0.0
        with pytest.raises(ZeroVectorError):
            a.normalize()

    def test_grown_vector_math(self):
        """Test that grown components take part in the math."""
        emb = DynamicEmbedding.empty()
        emb.set(0, 3)
        emb.set(1, 4)
        assert emb.magnitude() == 5.0
        emb.normalize()
        assert emb.magnitude() == pytest.approx(1.0, abs=1e-6)


class TestFactory:
    """Tests for construction policy selection."""

    def test_default_policy_is_strict(self):
        """Test that create() uses the strict policy by default."""
        assert DEFAULT_POLICY == "strict"
        emb = create([1, 2, 3])
        assert isinstance(emb, Embedding)
        with pytest.raises(EmptyInputError):
            create([])

    def test_dynamic_policy(self):
        """Test that the dynamic policy allows empty input."""
        emb = create([], policy="dynamic")
        assert isinstance(emb, DynamicEmbedding)
        assert emb.dim == 0

    def test_create_empty(self):
        """Test create_empty under both policies."""
        assert create_empty(policy="dynamic").dim == 0
        with pytest.raises(EmptyInputError):
            create_empty()

    def test_create_passes_dtype(self):
        """Test that the storage dtype reaches the embedding."""
        emb = create([1.0], dtype="float64")
        assert emb.dtype == np.float64

    def test_policy_lookup(self):
        """Test policy name resolution."""
        assert get_embedding_class("STRICT") is Embedding
        assert get_embedding_class("dynamic") is DynamicEmbedding
        assert get_embedding_class(None) is Embedding
        with pytest.raises(ValueError):
            get_embedding_class("lenient")
