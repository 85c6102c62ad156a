"""Unit tests for the keyed checksum."""

from plpublisher.crypto.checksum import keyed_checksum


class TestKeyedChecksum:
    """Test keyed_checksum function."""

    def test_known_vectors(self) -> None:
        """Digest matches reference MD5 values."""
        assert keyed_checksum("abc") == "900150983cd24fb0d6963f7d28e17f72"
        assert keyed_checksum("123", "123") == "4297f44b13955235245b2497399d7a93"
        assert keyed_checksum("saad", "1", "123") == "bb753c1132820d544bb564d9520b94a9"

    def test_empty_input(self) -> None:
        """Empty input is valid and hashes the empty string."""
        assert keyed_checksum() == "d41d8cd98f00b204e9800998ecf8427e"
        assert keyed_checksum("", "") == "d41d8cd98f00b204e9800998ecf8427e"

    def test_fragments_are_concatenated_in_order(self) -> None:
        """Only the concatenation matters, and order changes the digest."""
        assert keyed_checksum("12", "3123") == keyed_checksum("123", "123")
        assert keyed_checksum("a", "b") != keyed_checksum("b", "a")

    def test_lowercase_hex_of_fixed_length(self) -> None:
        """Result is 32 lowercase hex characters."""
        digest = keyed_checksum("SOME", "Input", "ü")
        assert len(digest) == 32
        assert digest == digest.lower()
        int(digest, 16)
