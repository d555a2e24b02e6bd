"""Tests for sentence type classification."""

import pytest

from nmeadecode import SentenceType
from nmeadecode.classifier import (
    SENTENCE_TYPE_TABLE,
    VALID_TALKER_IDS,
    classify_sentence,
)


class TestSentenceTypeTable:
    """Tests for the prefix table contents."""

    def test_prefixes_are_six_characters(self):
        assert all(len(prefix) == 6 for prefix, _ in SENTENCE_TYPE_TABLE)

    def test_prefixes_are_unique(self):
        prefixes = [prefix for prefix, _ in SENTENCE_TYPE_TABLE]
        assert len(prefixes) == len(set(prefixes))

    def test_prefix_names_its_sentence_type(self):
        for prefix, sentence_type in SENTENCE_TYPE_TABLE:
            assert prefix[3:] == sentence_type.value

    def test_gps_vtg_prefix(self):
        assert ("$GPVTG", SentenceType.VTG) in SENTENCE_TYPE_TABLE
        assert all(prefix != "$GPVTF" for prefix, _ in SENTENCE_TYPE_TABLE)

    def test_unknown_is_never_a_table_entry(self):
        assert all(t is not SentenceType.UNKNOWN for _, t in SENTENCE_TYPE_TABLE)


class TestClassifySentence:
    """Tests for classify_sentence function."""

    @pytest.mark.parametrize(
        ("sentence", "expected"),
        [
            ("$GPGGA,123519.00,4807.038,N", SentenceType.GGA),
            ("$GPGSA,A,3", SentenceType.GSA),
            ("$GPGSV,2,1,08", SentenceType.GSV),
            ("$GPVTG,054.7,T,034.4,M,005.5,N,010.2,K", SentenceType.VTG),
        ],
    )
    def test_known_gps_types(self, sentence, expected):
        assert classify_sentence(sentence) is expected

    def test_multi_constellation_talkers(self):
        for talker_id in VALID_TALKER_IDS:
            assert classify_sentence(f"${talker_id}GSV,1,1,00") is SentenceType.GSV

    def test_unknown_sentence_id(self):
        assert classify_sentence("$GPXXX,1,2,3") is SentenceType.UNKNOWN

    def test_unknown_talker(self):
        assert classify_sentence("$XXGGA,123519.00") is SentenceType.UNKNOWN

    def test_empty_string(self):
        assert classify_sentence("") is SentenceType.UNKNOWN

    def test_shorter_than_prefix(self):
        assert classify_sentence("$GPGG") is SentenceType.UNKNOWN

    def test_exact_prefix_only(self):
        assert classify_sentence("$GPGGA") is SentenceType.GGA

    def test_one_character_mismatch(self):
        assert classify_sentence("$GPVTF,054.7") is SentenceType.UNKNOWN

    def test_case_sensitive(self):
        assert classify_sentence("$gpgga,123519.00") is SentenceType.UNKNOWN

    def test_missing_start_delimiter(self):
        assert classify_sentence("GPGGA,123519.00") is SentenceType.UNKNOWN

    def test_leading_whitespace(self):
        assert classify_sentence(" $GPGGA,123519.00") is SentenceType.UNKNOWN
