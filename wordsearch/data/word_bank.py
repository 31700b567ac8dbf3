"""Built-in themed vocabulary and word selection helpers.

The tables are plain constants handed to callers; nothing here is mutated
at runtime.
"""

from __future__ import annotations

import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..core.exceptions import ConfigurationError


BIBLE_WORDS: Dict[str, Tuple[str, ...]] = {
    "easy": (
        "JESUS", "DIEU", "AMOUR", "FOI", "PAIX", "JOIE", "GRACE", "ESPRIT",
        "BIBLE", "PRIERE", "AMEN", "CIEL", "VIE", "COEUR", "ANGE", "CROIX",
        "ARCHE", "LION", "PAIN", "VIN", "ROI", "FILS", "PERE", "MERE",
        "EAU", "FEU", "VENT", "NOEL", "PSAUME", "LIVRE", "SAINT", "JUSTE",
    ),
    "medium": (
        "SALUT", "PARDON", "LOUANGE", "GLOIRE", "SAINTE", "VERITE", "LUMIERE",
        "BERGER", "TEMPLE", "ESPOIR", "SAGESSE", "JUSTICE", "PROMESSE", "ALLIANCE",
        "MIRACLE", "PARABOLE", "APOTRE", "DISCIPLE", "PROPHETE", "EVANGILE", "BAPTEME",
        "ETERNEL", "CREATEUR", "SAUVEUR", "MESSIE", "CHRIST", "SEPULCRE", "CALVAIRE",
        "GOLGOTHA", "NAZARETH", "GALILEE", "JOURDAIN", "DESERT", "MANNE", "AUTEL",
        "ENCENS", "TUNIQUE", "TABLES", "LOI", "PECHE", "ENFER", "PARADIS",
    ),
    "hard": (
        "RESURRECTION", "REDEMPTION", "SANCTIFICATION", "JUSTIFICATION", "RECONCILIATION",
        "BENEDICTION", "REVELATION", "PERSECUTION", "CONVERSION", "INTERCESSION",
        "TRANSFIGURATION", "PENTECOTE", "TABERNACLE", "SACRIFICATEUR", "PHARISIEN",
        "SADDUCEEN", "SYNAGOGUE", "LEVITE", "SAMARITAIN", "CENTENIER", "GOUVERNEUR",
        "PROCURATEUR", "TETRARQUE", "APOCALYPSE", "EPIPHANIE", "ASCENSION",
        "CAREME", "EUCHARISTIE", "COMMUNION", "ADOPTION", "PREDESTINATION", "GLORIFICATION",
        "EXPIATION", "PROPITIATION", "REGENERATION", "INCARNATION", "OMNIPRESENCE", "OMNISCIENCE",
    ),
    "names": (
        "MOISE", "ABRAHAM", "DAVID", "SALOMON", "ELIE", "DANIEL", "PIERRE",
        "PAUL", "MARIE", "JOSEPH", "SAMUEL", "ESAIE", "JEREMIE",
        "NOE", "ADAM", "EVE", "ABEL", "CAIN", "SETH", "ENOCH", "METHUSALEM",
        "SARAH", "AGAR", "ISMAEL", "ISAAC", "REBECCA", "JACOB", "ESAU", "LEA",
        "RACHEL", "BENJAMIN", "JUDA", "LEVI", "AARON", "JOSUE", "CALEB",
        "GEDEON", "SAMSON", "RUTH", "BOAZ", "NAOMI", "ANNE", "SAUL", "JONATHAN",
        "GOLIATH", "ABSALOM", "BETHSABEE", "REHABEAM", "JEROBOAM",
        "ELISEE", "NAAMAN", "JONAS", "OSEE", "JOEL", "AMOS", "ABDIAS", "MICHEE",
        "NAHUM", "HABACUC", "SOPHONIE", "AGGEE", "ZACHARIE", "MALACHIE", "JEAN",
        "JACQUES", "ANDRE", "PHILIPPE", "BARTHELEMY", "THOMAS", "MATTHIEU",
        "SIMON", "JUDAS", "MATTHIAS", "ETIENNE", "BARNABAS", "SILAS",
        "TIMOTHEE", "TITE", "PHILEMON", "AQUILAS", "PRISCILLE", "APOLLOS",
    ),
    "places": (
        "JERUSALEM", "BETHLEEM", "NAZARETH", "GALILEE", "EGYPTE", "JORDAN",
        "SINAI", "CANAAN", "BABEL", "EDEN", "JERICHO", "SODOME", "GOMORRE",
        "UR", "HARAN", "GOSEN", "MERROUGE", "MARAH", "ELIM", "REPHIDIM",
        "HOREB", "KADESH", "PISGA", "NEBO", "GILGAL", "AI", "GABAON", "HEBRON",
        "SILO", "BETHEL", "DAN", "BEERSHEBA", "SION", "MORIJA", "CARMEL",
        "SAMARIE", "NINIVE", "BABYLONE", "SUSE", "DAMAS", "ANTIOCHE", "TARSE",
        "CHYPRE", "CRETE", "MALTE", "ROME", "CORINTHE", "EPHESE", "PHILIPPES",
        "THESSALONIQUE", "BEREE", "ATHENES", "CENCHREE", "LAODICEE", "SARDES",
        "PHILADELPHIE", "SMYRNE", "PERGAME", "THYATIRE", "PATMOS", "GETHSEMANE",
        "CANA", "CAPERNAUM", "BETHANIE", "EMMAUS", "SYCHAR",
    ),
}

# Flat list used by the classic square puzzles.
CLASSIC_WORDS: Tuple[str, ...] = (
    "JESUS", "BIBLE", "AMOUR", "FOI", "CROIX",
    "DIEU", "ESPRIT", "PAIX", "JOIE", "PRIERE",
    "EGLISE", "SALUT", "GRACE", "CHRIST", "PERE",
    "SAINT", "ANGES", "CIEL", "MONDE", "VIE",
    "COEUR", "AME", "VERITE", "PAROLE", "LOI",
    "ROIS", "JUGE", "PROPHETE", "TEMPLE", "AUTEL",
    "AGNEAU", "LION", "PAIN", "VIN", "EAU",
    "BAPTEME", "REPAS", "JEUNE", "DON", "VUE",
    "EDEN", "ARCHE", "MONTS", "MER", "JOUR",
    "NUIT", "ETOILE", "MAGE", "BERGER", "MARIE",
    "JOSEPH", "PIERRE", "PAUL", "JEAN", "MARC",
    "LUC", "ADAM", "EVE", "ABEL", "CAIN",
    "NOE", "ABRAHAM", "ISAAC", "JACOB", "ESAIE",
    "DAVID", "GOLIATH", "SAUL", "JUDAS", "THOMAS",
    "SIMON", "MARTHE", "LAZARE", "ROME", "SION",
)

# Length band per word count: (upper word count, min length, max length).
_LENGTH_BANDS: Tuple[Tuple[int, int, Optional[int]], ...] = (
    (8, 3, 7),
    (12, 3, 9),
    (18, 4, 12),
)


def all_words(categories: Optional[Iterable[str]] = None) -> List[str]:
    """Return unique words from ``categories`` (all by default), first-seen order."""

    names = list(categories) if categories is not None else list(BIBLE_WORDS)
    seen = set()
    words: List[str] = []
    for name in names:
        if name not in BIBLE_WORDS:
            raise ConfigurationError(f"Unknown word category: {name!r}")
        for word in BIBLE_WORDS[name]:
            if word not in seen:
                seen.add(word)
                words.append(word)
    return words


def sample_words(
    count: int,
    rng: Optional[random.Random] = None,
    words: Optional[Sequence[str]] = None,
) -> List[str]:
    """Pick ``count`` distinct words at random (fewer if the pool is smaller)."""

    if count < 0:
        raise ConfigurationError(f"Word count must be >= 0, got {count}")
    pool = list(dict.fromkeys(words if words is not None else CLASSIC_WORDS))
    rng = rng or random.Random()
    return rng.sample(pool, min(count, len(pool)))


def words_for_board(board_index: int, word_count: int) -> List[str]:
    """Deterministic word selection so a board always shows the same words."""

    if board_index < 0:
        raise ConfigurationError(f"Board index must be >= 0, got {board_index}")
    shuffled = all_words()
    random.Random(board_index * 7919 + 31337).shuffle(shuffled)

    min_len, max_len = 3, None
    for upper, band_min, band_max in _LENGTH_BANDS:
        if word_count <= upper:
            min_len, max_len = band_min, band_max
            break
    filtered = [
        word
        for word in shuffled
        if len(word) >= min_len and (max_len is None or len(word) <= max_len)
    ]
    if len(filtered) < word_count:
        filtered = shuffled
    return filtered[:word_count]
