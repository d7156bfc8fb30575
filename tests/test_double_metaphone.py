"""
Encoding tests for DoubleMetaphone on a corpus covering every letter rule.
"""
import pytest

from metaphone_utils import DoubleMetaphone, double_metaphone
from metaphone_utils.config import STOP_LENGTH

# name -> (primary, alternate); alternate "" means no alternate pronunciation
CORPUS = {
    # vowels, plain consonants
    "ivan": ("AFN", ""),
    "evan": ("AFN", ""),
    "before": ("PFR", ""),
    "after": ("AFTR", ""),
    "monday": ("MNT", ""),
    "tuesday": ("TST", ""),
    "plated": ("PLTT", ""),
    "blotted": ("PLTT", ""),
    "Caffrey": ("KFR", ""),
    # C and its combinations
    "bacher": ("PKR", ""),
    "packer": ("PKR", ""),
    "Caesar": ("SSR", ""),
    "Chianti": ("KNT", ""),
    "Michael": ("MKL", "MXL"),
    "Chemistry": ("KMST", ""),
    "Charles": ("XRLS", ""),
    "Hochmeier": ("HKMR", ""),
    "Orchestra": ("ARKS", ""),
    "McHugh": ("MK", ""),
    "Czerny": ("SRN", "XRN"),
    "Focaccia": ("FKX", ""),
    "Accident": ("AKST", ""),
    "Bacci": ("PX", ""),
    "McClellan": ("MKLL", ""),
    "Mac Caffrey": ("MKFR", ""),
    # D, G, GH
    "Edge": ("AJ", ""),
    "Edgar": ("ATKR", ""),
    "Hugh": ("H", ""),
    "Laugh": ("LF", ""),
    "Knight": ("NT", ""),
    "Ghislane": ("JLN", ""),
    "Tagliaro": ("TKLR", "TLR"),
    "Biaggi": ("PJ", "PK"),
    "Cagney": ("KKN", ""),
    "Agnes": ("AKNS", "ANS"),
    "Danger": ("TNJR", "TNKR"),
    "Rogier": ("RJ", "RJR"),
    # J
    "Jose": ("HS", ""),
    "Jones": ("JNS", "ANS"),
    "Bajador": ("PJTR", "PHTR"),
    "San Jacinto": ("SNHS", ""),
    "Jankelowicz": ("JNKL", "ANKL"),
    "Yankelovich": ("ANKL", ""),
    # L, M, P
    "Gallegos": ("KLKS", "KKS"),
    "Cabrillo": ("KPRL", "KPR"),
    "Campbell": ("KMPL", ""),
    "Dumb": ("TM", ""),
    "Thumb": ("0M", "TM"),
    "Philip": ("FLP", ""),
    "Gnome": ("NM", ""),
    # S and SC
    "Smith": ("SM0", "XMT"),
    "Schmidt": ("XMT", "SMT"),
    "Snider": ("SNTR", "XNTR"),
    "Schneider": ("XNTR", "SNTR"),
    "Schermerhorn": ("XRMR", "SKRM"),
    "School": ("SKL", ""),
    "Sugar": ("XKR", "SKR"),
    "Island": ("ALNT", ""),
    "Resnais": ("RSN", "RSNS"),
    "Rudesheim": ("RTSM", ""),
    "Artois": ("ART", "ARTS"),
    # T, TH
    "Thomas": ("TMS", ""),
    "Thames": ("TMS", ""),
    "Matthew": ("M0", "MTF"),
    # W, X, Z
    "Wright": ("RT", ""),
    "Arnow": ("ARN", "ARNF"),
    "Wasserman": ("ASRM", "FSRM"),
    "Uomo": ("AM", ""),
    "Womo": ("AM", "FM"),
    "Filipowicz": ("FLPT", "FLPF"),
    "Xavier": ("SF", "SFR"),
    "Breaux": ("PR", ""),
    "Zhao": ("J", ""),
    "Zola": ("SL", ""),
    "Pizza": ("PS", "PTS"),
    # accented letters
    "Çelik": ("LK", "SLK"),
    "Muñoz": ("MNS", ""),
}


@pytest.mark.parametrize("name,expected", sorted(CORPUS.items()))
def test_corpus(name, expected):
    snd = DoubleMetaphone(name)
    assert (snd.primary, snd.alternate) == expected
    assert snd.has_alternate == bool(expected[1])


@pytest.mark.parametrize("name", sorted(CORPUS))
def test_narrow_and_wide_agree(name):
    wide = DoubleMetaphone(name)
    narrow = DoubleMetaphone(name.encode("latin-1"))
    assert wide.codes() == narrow.codes()
    assert wide.has_alternate == narrow.has_alternate


@pytest.mark.parametrize("name", sorted(CORPUS))
def test_limited_codes_are_capped(name):
    snd = DoubleMetaphone(name)
    assert len(snd.primary) <= STOP_LENGTH
    assert len(snd.alternate) <= STOP_LENGTH
    if not snd.has_alternate:
        assert snd.alternate == ""


def test_case_insensitive():
    assert DoubleMetaphone("SMITH").codes() == DoubleMetaphone("smith").codes()
    assert DoubleMetaphone(b"SMITH").codes() == DoubleMetaphone(b"smith").codes()


def test_unlimited_length():
    snd = DoubleMetaphone("Filipowicz", limit_length=False)
    assert snd.primary == "FLPTS"
    assert snd.alternate == "FLPFX"
    assert not snd.limit_length

    long_word = DoubleMetaphone("antidisestablishmentarianism", limit_length=False)
    assert long_word.primary.startswith("ANTTS")
    assert len(long_word.primary) > STOP_LENGTH
    assert DoubleMetaphone("antidisestablishmentarianism").primary == "ANTT"


def test_empty_and_unsupported_input():
    for name in ("", "   ", "123-456!", b"", b"\x00\xff"):
        snd = DoubleMetaphone(name)
        assert snd.primary == ""
        assert snd.alternate == ""
        assert snd.has_alternate is False


def test_unsupported_characters_are_dropped():
    assert DoubleMetaphone("O'Brien-Smith").codes() == DoubleMetaphone("OBrienSmith").codes()
    assert DoubleMetaphone("José").codes() == DoubleMetaphone("Jos").codes()
    assert DoubleMetaphone("Jos").codes() == ("JS", "AS")


def test_lowercase_accented_bytes():
    assert DoubleMetaphone(b"\xe7elik").codes() == ("LK", "SLK")
    assert DoubleMetaphone(b"mu\xf1oz").codes() == ("MNS", "")


def test_double_metaphone_function():
    assert double_metaphone("Schmidt") == ("XMT", "SMT")
    assert double_metaphone("bacher") == ("PKR", "")


def test_read_only():
    snd = DoubleMetaphone("Smith")
    with pytest.raises(AttributeError):
        snd.primary = "X"
    with pytest.raises(AttributeError):
        snd._primary = "X"


def test_rejects_other_types():
    with pytest.raises(TypeError):
        DoubleMetaphone(42)


def test_str_and_repr():
    assert str(DoubleMetaphone("Smith")) == "SM0/XMT"
    assert str(DoubleMetaphone("bacher")) == "PKR"
    assert "SM0" in repr(DoubleMetaphone("Smith"))
