"""
rules.py - Per-letter Double Metaphone rules.

Each rule is a plain function ``rule(buf, pos) -> Step`` that looks at a small
window around ``pos``, returns the code fragment(s) for the letters it
consumed and the position of the next unread letter. ``LETTER_RULES`` maps
every letter with a rule to its function; anything else (space) is skipped.
"""
from typing import Callable, Dict

from metaphone_utils.encoder.accumulator import Step
from metaphone_utils.encoder.heuristics import (
    is_germanic_c,
    is_slavo_germanic,
    is_spanish_ll,
    starts_germanic,
)
from metaphone_utils.encoder.name_buffer import C_CEDILLA, N_TILDE, NameBuffer
from metaphone_utils.encoder.predicates import char_in, is_vowel, matches_one_of

Rule = Callable[[NameBuffer, int], Step]

SILENT_STARTS = ("GN", "KN", "PN", "WR", "PS")


def _code(primary: str, pos: int) -> Step:
    return Step(primary, None, pos)


def _fork(primary: str, alternate: str, pos: int) -> Step:
    return Step(primary, alternate, pos)


def _skip_double(buf: NameBuffer, pos: int, letters: str) -> int:
    """Position after the letter at pos, and after the next one too if it is in ``letters``."""
    return pos + 2 if char_in(buf.peek(pos + 1), letters) else pos + 1


def skip_silent_start(buf: NameBuffer) -> int:
    """Start position: 1 for names beginning with a silent-letter digraph, else 0."""
    if matches_one_of(buf, buf.first, 2, SILENT_STARTS):
        return buf.first + 1
    return buf.first


def vowel(buf: NameBuffer, pos: int) -> Step:
    # only an initial vowel is coded, always as 'A'
    if pos == buf.first:
        return _code("A", pos + 1)
    return _code("", pos + 1)


def letter_b(buf: NameBuffer, pos: int) -> Step:
    # '-mb' is handled by letter_m
    return _code("P", _skip_double(buf, pos, "B"))


def letter_c_cedilla(buf: NameBuffer, pos: int) -> Step:
    return _fork("", "S", pos + 1)


def letter_c(buf: NameBuffer, pos: int) -> Step:
    first = buf.first

    if is_germanic_c(buf, pos):
        return _code("K", pos + 2)

    if pos == first and buf.window(pos, 6) == "CAESAR":
        return _code("S", pos + 2)

    # 'chianti'
    if buf.window(pos, 4) == "CHIA":
        return _code("K", pos + 2)

    if buf.window(pos, 2) == "CH":
        return combo_ch(buf, pos)

    # 'czerny', but not polish '-wicz'
    if buf.window(pos, 2) == "CZ" and buf.window(pos - 2, 4) != "WICZ":
        return _fork("S", "X", pos + 2)

    # 'focaccia'
    if buf.window(pos + 1, 3) == "CIA":
        return _code("X", pos + 3)

    # 'accident', 'bellocchio', but not 'mcclellan'
    if buf.window(pos, 2) == "CC" and buf.window(pos - 1, 3) != "MCC":
        return combo_cc(buf, pos)

    if matches_one_of(buf, pos, 2, ("CK", "CG", "CQ")):
        return _code("K", pos + 2)

    if matches_one_of(buf, pos, 2, ("CI", "CE", "CY")):
        # italian 'ciao' vs english 'cyrus'
        if matches_one_of(buf, pos, 3, ("CIO", "CIE", "CIA")):
            return _fork("S", "X", pos + 2)
        return _code("S", pos + 2)

    # 'mac caffrey', 'mac gregor'
    if matches_one_of(buf, pos + 1, 2, (" C", " Q", " G")):
        return _code("K", pos + 3)

    if char_in(buf.peek(pos + 1), "CKQ") and not matches_one_of(buf, pos + 1, 2, ("CE", "CI")):
        return _code("K", pos + 2)

    return _code("K", pos + 1)


def combo_ch(buf: NameBuffer, pos: int) -> Step:
    """'CH' at pos: K for greek and germanic origins, X otherwise, forked when unclear."""
    first = buf.first

    # 'michael'
    if pos > first and buf.window(pos, 4) == "CHAE":
        return _fork("K", "X", pos + 2)

    # greek roots at the start: 'chemistry', 'chorus', 'character'
    if pos == first and buf.window(pos, 5) != "CHORE" and (
            matches_one_of(buf, pos + 1, 5, ("HARAC", "HARIS")) or
            matches_one_of(buf, pos + 1, 3, ("HOR", "HYM", "HIA", "HEM"))):
        return _code("K", pos + 2)

    if (starts_germanic(buf) or
            matches_one_of(buf, pos - 2, 6, ("ORCHES", "ARCHIT", "ORCHID")) or
            char_in(buf.peek(pos + 2), "TS") or
            (char_in(buf.peek(pos - 1), "AOUE_") and
             char_in(buf.peek(pos + 2), "LRNMBHFVW _"))):
        return _code("K", pos + 2)

    if pos > first:
        # 'mchugh'
        if buf.window(first, 2) == "MC":
            return _code("K", pos + 2)
        return _fork("X", "K", pos + 2)

    return _code("X", pos + 2)


def combo_cc(buf: NameBuffer, pos: int) -> Step:
    """'CC' at pos, 'mcc' already excluded."""
    # 'bellocchio' but not 'bacchus'
    if char_in(buf.peek(pos + 2), "IEH") and buf.window(pos + 2, 2) != "HU":
        # 'accident', 'accede', 'succeed'
        if (pos == buf.first + 1 and buf.peek(pos - 1) == "A") or \
                matches_one_of(buf, pos - 1, 5, ("UCCEE", "UCCES")):
            return _code("KS", pos + 3)
        # 'bacci', 'bertucci'
        return _code("X", pos + 3)
    return _code("K", pos + 2)


def letter_d(buf: NameBuffer, pos: int) -> Step:
    if buf.window(pos, 2) == "DG":
        # 'edge'
        if char_in(buf.peek(pos + 2), "IEY"):
            return _code("J", pos + 3)
        # 'edgar'
        return _code("TK", pos + 2)

    return _code("T", _skip_double(buf, pos, "TD"))


def letter_f(buf: NameBuffer, pos: int) -> Step:
    return _code("F", _skip_double(buf, pos, "F"))


def letter_g(buf: NameBuffer, pos: int) -> Step:
    first = buf.first
    nxt = buf.peek(pos + 1)

    if nxt == "H":
        return combo_gh(buf, pos)

    if nxt == "N":
        if pos == first + 1 and is_vowel(buf.peek(first)) and not is_slavo_germanic(buf):
            return _fork("KN", "N", pos + 2)
        # not 'cagney'
        if buf.window(pos + 2, 2) != "EY" and not is_slavo_germanic(buf):
            return _fork("N", "KN", pos + 2)
        return _code("KN", pos + 2)

    # 'tagliaro'
    if buf.window(pos + 1, 2) == "LI" and not is_slavo_germanic(buf):
        return _fork("KL", "L", pos + 2)

    # -ges-, -gep-, -gel-, -gie- at the start
    if pos == first and (nxt == "Y" or matches_one_of(
            buf, pos + 1, 2,
            ("ES", "EP", "EB", "EL", "EY", "IB", "IL", "IN", "IE", "EI", "ER"))):
        return _fork("K", "J", pos + 2)

    # -ger-, -gy-
    if (buf.window(pos + 1, 2) == "ER" or nxt == "Y") and \
            not matches_one_of(buf, first, 6, ("DANGER", "RANGER", "MANGER")) and \
            not char_in(buf.peek(pos - 1), "EI") and \
            not matches_one_of(buf, pos - 1, 3, ("RGY", "OGY")):
        return _fork("K", "J", pos + 2)

    # italian 'biaggi'
    if char_in(nxt, "EIY") or matches_one_of(buf, pos - 1, 4, ("AGGI", "OGGI")):
        if starts_germanic(buf) or buf.window(pos + 1, 2) == "ET":
            return _code("K", pos + 2)
        # always soft with a french '-ier' ending
        if buf.window(pos + 1, 4) == "IER_":
            return _code("J", pos + 2)
        return _fork("J", "K", pos + 2)

    return _code("K", _skip_double(buf, pos, "G"))


def combo_gh(buf: NameBuffer, pos: int) -> Step:
    first = buf.first

    if pos > first and not is_vowel(buf.peek(pos - 1)):
        return _code("K", pos + 2)

    # 'ghislane', 'ghost'
    if pos == first:
        if buf.peek(pos + 2) == "I":
            return _code("J", pos + 2)
        return _code("K", pos + 2)

    # Parker's rule: 'hugh', 'bough', 'broughton'
    if char_in(buf.peek(pos - 2), "BHD") or char_in(buf.peek(pos - 3), "BHD") or \
            char_in(buf.peek(pos - 4), "BH"):
        return _code("", pos + 2)

    # 'laugh', 'mclaughlin', 'cough', 'rough', 'tough'
    if pos > first + 2 and buf.peek(pos - 1) == "U" and char_in(buf.peek(pos - 3), "CGLRT"):
        return _code("F", pos + 2)
    if pos > first and buf.peek(pos - 1) != "I":
        return _code("K", pos + 2)
    return _code("", pos + 2)


def letter_h(buf: NameBuffer, pos: int) -> Step:
    # only keep an H at the start or between vowels, and only before a vowel
    if (pos == buf.first or is_vowel(buf.peek(pos - 1))) and is_vowel(buf.peek(pos + 1)):
        return _code("H", pos + 2)
    return _code("", pos + 1)


def letter_j(buf: NameBuffer, pos: int) -> Step:
    first = buf.first
    primary, alternate = "", None

    # spanish 'jose', 'san jacinto'
    if buf.window(pos, 4) == "JOSE" or buf.window(first, 4) == "SAN ":
        if (pos == first and buf.peek(pos + 4) == " ") or buf.last - first == 3 or \
                buf.window(first, 4) == "SAN ":
            primary = "H"
        else:
            primary, alternate = "J", "H"
        # the common advance below moves past one more letter
        pos += 1
    elif pos == first:
        # 'yankelovich' / 'jankelowicz'
        primary, alternate = "J", "A"
    elif is_vowel(buf.peek(pos - 1)) and not is_slavo_germanic(buf) and \
            char_in(buf.peek(pos + 1), "AO"):
        # spanish 'bajador'
        primary, alternate = "J", "H"
    elif pos == buf.last:
        primary, alternate = "J", ""
    elif not char_in(buf.peek(pos + 1), "LTKSNMBZ") and not char_in(buf.peek(pos - 1), "SKL"):
        primary = "J"

    return Step(primary, alternate, _skip_double(buf, pos, "J"))


def letter_k(buf: NameBuffer, pos: int) -> Step:
    return _code("K", _skip_double(buf, pos, "K"))


def letter_l(buf: NameBuffer, pos: int) -> Step:
    if buf.peek(pos + 1) == "L":
        # 'cabrillo', 'gallegos'
        if is_spanish_ll(buf, pos):
            return _fork("L", "", pos + 2)
        return _code("L", pos + 2)
    return _code("L", pos + 1)


def letter_m(buf: NameBuffer, pos: int) -> Step:
    # 'dumb', 'thumb', 'dumber', 'dummy', but not 'thumbelina'
    if (buf.window(pos - 1, 3) == "UMB" and
            (pos + 1 == buf.last or buf.window(pos + 2, 2) == "ER")) or \
            buf.peek(pos + 1) == "M":
        return _code("M", pos + 2)
    return _code("M", pos + 1)


def letter_n(buf: NameBuffer, pos: int) -> Step:
    return _code("N", _skip_double(buf, pos, "N"))


def letter_n_tilde(buf: NameBuffer, pos: int) -> Step:
    return _code("N", pos + 1)


def letter_p(buf: NameBuffer, pos: int) -> Step:
    # 'phyllis'
    if buf.peek(pos + 1) == "H":
        return _code("F", pos + 2)
    # 'campbell', 'steppenwolf'
    return _code("P", _skip_double(buf, pos, "PB"))


def letter_q(buf: NameBuffer, pos: int) -> Step:
    return _code("K", _skip_double(buf, pos, "Q"))


def letter_r(buf: NameBuffer, pos: int) -> Step:
    nxt = _skip_double(buf, pos, "R")
    # french 'rogier', but not germanic 'hochmeier'
    if pos == buf.last and not is_slavo_germanic(buf) and \
            buf.window(pos - 2, 2) == "IE" and \
            not matches_one_of(buf, pos - 4, 2, ("ME", "MA")):
        return _fork("", "R", nxt)
    return _code("R", nxt)


def letter_s(buf: NameBuffer, pos: int) -> Step:
    first = buf.first
    nxt = buf.peek(pos + 1)

    # 'island', 'isle', 'carlisle', 'carlysle'
    if matches_one_of(buf, pos - 1, 3, ("ISL", "YSL")):
        return _code("", pos + 1)

    if pos == first and buf.window(pos, 5) == "SUGAR":
        return _fork("X", "S", pos + 1)

    if buf.window(pos, 2) == "SH":
        # germanic 'rudesheim'
        if matches_one_of(buf, pos + 1, 4, ("HEIM", "HOEK", "HOLM", "HOLZ")):
            return _code("S", pos + 2)
        return _code("X", pos + 2)

    # italian and armenian
    if matches_one_of(buf, pos, 3, ("SIO", "SIA")):
        if is_slavo_germanic(buf):
            return _code("S", pos + 3)
        return _fork("S", "X", pos + 3)

    # 'smith' vs 'schmidt', 'snider' vs 'schneider', slavic -sz-
    if (pos == first and char_in(nxt, "MNLW")) or nxt == "Z":
        return _fork("S", "X", pos + 2 if nxt == "Z" else pos + 1)

    if buf.window(pos, 2) == "SC":
        return combo_sc(buf, pos)

    # french 'resnais', 'artois'
    if pos == buf.last and matches_one_of(buf, pos - 2, 2, ("AI", "OI")):
        return _fork("", "S", pos + 1)

    return _code("S", _skip_double(buf, pos, "SZ"))


def combo_sc(buf: NameBuffer, pos: int) -> Step:
    """'SC' at pos; always consumes three letters."""
    if buf.peek(pos + 2) == "H":
        # Schlesinger's rule: dutch 'school', 'schooner'
        if matches_one_of(buf, pos + 3, 2, ("OO", "ER", "EN", "UY", "ED", "EM")):
            # 'schermerhorn', 'schenker'
            if matches_one_of(buf, pos + 3, 2, ("ER", "EN")):
                return _fork("X", "SK", pos + 3)
            return _code("SK", pos + 3)
        if pos == buf.first and not is_vowel(buf.peek(pos + 3)) and buf.peek(pos + 3) != "W":
            return _fork("X", "S", pos + 3)
        return _code("X", pos + 3)

    if char_in(buf.peek(pos + 2), "IEY"):
        return _code("S", pos + 3)
    return _code("SK", pos + 3)


def letter_t(buf: NameBuffer, pos: int) -> Step:
    if buf.window(pos, 4) == "TION" or matches_one_of(buf, pos, 3, ("TIA", "TCH")):
        return _code("X", pos + 3)

    if buf.window(pos, 2) == "TH" or buf.window(pos, 3) == "TTH":
        # 'thomas', 'thames' or germanic
        if matches_one_of(buf, pos + 2, 2, ("OM", "AM")) or starts_germanic(buf):
            return _code("T", pos + 2)
        return _fork("0", "T", pos + 2)

    return _code("T", _skip_double(buf, pos, "TD"))


def letter_v(buf: NameBuffer, pos: int) -> Step:
    return _code("F", _skip_double(buf, pos, "V"))


def letter_w(buf: NameBuffer, pos: int) -> Step:
    # can also be in the middle of a word
    if buf.window(pos, 2) == "WR":
        return _code("R", pos + 2)

    primary = alternate = ""
    forked = False
    if pos == buf.first and (is_vowel(buf.peek(pos + 1)) or buf.window(pos, 2) == "WH"):
        # 'wasserman' should match 'vasserman'
        if is_vowel(buf.peek(pos + 1)):
            primary, alternate, forked = "A", "F", True
        else:
            # 'uomo' should match 'womo'
            primary = alternate = "A"

    # 'arnow' should match 'arnoff'
    if (pos == buf.last and is_vowel(buf.peek(pos - 1))) or \
            matches_one_of(buf, pos - 1, 5, ("EWSKI", "EWSKY", "OWSKI", "OWSKY")) or \
            buf.startswith("SCH"):
        return _fork(primary, alternate + "F", pos + 1)

    # polish 'filipowicz'
    if matches_one_of(buf, pos, 4, ("WICZ", "WITZ")):
        return _fork(primary + "TS", alternate + "FX", pos + 4)

    return Step(primary, alternate if forked else None, pos + 1)


def letter_x(buf: NameBuffer, pos: int) -> Step:
    nxt = _skip_double(buf, pos, "CX")
    # initial X sounds like Z: 'xavier'
    if pos == buf.first:
        return _code("S", nxt)
    # french trailing X is silent: 'breaux'
    if pos == buf.last and (matches_one_of(buf, pos - 3, 3, ("IAU", "EAU")) or
                            matches_one_of(buf, pos - 2, 2, ("AU", "OU"))):
        return _code("", nxt)
    return _code("KS", nxt)


def letter_z(buf: NameBuffer, pos: int) -> Step:
    # chinese pinyin 'zhao'
    if buf.peek(pos + 1) == "H":
        return _code("J", pos + 2)

    nxt = _skip_double(buf, pos, "Z")
    if matches_one_of(buf, pos + 1, 2, ("ZO", "ZI", "ZA")) or \
            (is_slavo_germanic(buf) and pos > buf.first and buf.peek(pos - 1) != "T"):
        return _fork("S", "TS", nxt)
    return _code("S", nxt)


def skip(buf: NameBuffer, pos: int) -> Step:
    return _code("", pos + 1)


LETTER_RULES: Dict[str, Rule] = {
    "A": vowel,
    "E": vowel,
    "I": vowel,
    "O": vowel,
    "U": vowel,
    "Y": vowel,
    "B": letter_b,
    C_CEDILLA: letter_c_cedilla,
    "C": letter_c,
    "D": letter_d,
    "F": letter_f,
    "G": letter_g,
    "H": letter_h,
    "J": letter_j,
    "K": letter_k,
    "L": letter_l,
    "M": letter_m,
    "N": letter_n,
    N_TILDE: letter_n_tilde,
    "P": letter_p,
    "Q": letter_q,
    "R": letter_r,
    "S": letter_s,
    "T": letter_t,
    "V": letter_v,
    "W": letter_w,
    "X": letter_x,
    "Z": letter_z,
}


def rule_for(letter: str) -> Rule:
    return LETTER_RULES.get(letter, skip)
