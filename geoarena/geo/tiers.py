from __future__ import annotations

from geoarena.game.types import Difficulty

# 1 = famous, 2 = moderate, 3 = obscure.
DEFAULT_TIER = 3

COUNTRY_TIERS: dict[str, int] = {
    # Europe
    "AL": 2,
    "AD": 3,
    "AT": 2,
    "BY": 2,
    "BE": 2,
    "BA": 3,
    "BG": 2,
    "HR": 2,
    "CZ": 2,
    "DK": 2,
    "EE": 3,
    "FI": 2,
    "FR": 1,
    "DE": 1,
    "GR": 1,
    "HU": 2,
    "IS": 2,
    "IE": 2,
    "IT": 1,
    "XK": 3,
    "LV": 3,
    "LI": 3,
    "LT": 3,
    "LU": 3,
    "MK": 3,
    "MT": 3,
    "MD": 3,
    "MC": 3,
    "ME": 3,
    "NL": 2,
    "NO": 1,
    "PL": 1,
    "PT": 2,
    "RO": 2,
    "RU": 1,
    "SM": 3,
    "RS": 2,
    "SK": 3,
    "SI": 3,
    "ES": 1,
    "SE": 1,
    "CH": 2,
    "UA": 1,
    "GB": 1,
    "VA": 3,
    # Asia
    "AF": 2,
    "AM": 3,
    "AZ": 3,
    "BH": 3,
    "BD": 2,
    "BT": 3,
    "BN": 3,
    "KH": 2,
    "CN": 1,
    "CY": 3,
    "GE": 3,
    "IN": 1,
    "ID": 1,
    "IR": 1,
    "IQ": 1,
    "IL": 2,
    "JP": 1,
    "JO": 2,
    "KZ": 2,
    "KW": 3,
    "KG": 3,
    "LA": 3,
    "LB": 3,
    "MY": 2,
    "MV": 3,
    "MN": 2,
    "MM": 2,
    "NP": 2,
    "KP": 2,
    "OM": 3,
    "PK": 1,
    "PS": 3,
    "PH": 2,
    "QA": 3,
    "SA": 1,
    "SG": 3,
    "KR": 1,
    "LK": 2,
    "SY": 2,
    "TW": 2,
    "TJ": 3,
    "TH": 1,
    "TL": 3,
    "TR": 1,
    "TM": 3,
    "AE": 2,
    "UZ": 3,
    "VN": 1,
    "YE": 2,
    # Africa
    "DZ": 1,
    "AO": 2,
    "BJ": 3,
    "BW": 3,
    "BF": 3,
    "BI": 3,
    "CV": 3,
    "CM": 2,
    "CF": 3,
    "TD": 2,
    "KM": 3,
    "CG": 3,
    "CD": 1,
    "CI": 2,
    "DJ": 3,
    "EG": 1,
    "GQ": 3,
    "ER": 3,
    "SZ": 3,
    "ET": 1,
    "GA": 3,
    "GM": 3,
    "GH": 2,
    "GN": 3,
    "GW": 3,
    "KE": 1,
    "LS": 3,
    "LR": 3,
    "LY": 2,
    "MG": 2,
    "MW": 3,
    "ML": 2,
    "MR": 3,
    "MU": 3,
    "MA": 2,
    "MZ": 2,
    "NA": 2,
    "NE": 2,
    "NG": 1,
    "RW": 3,
    "ST": 3,
    "SN": 2,
    "SC": 3,
    "SL": 3,
    "SO": 2,
    "ZA": 1,
    "SS": 3,
    "SD": 2,
    "TZ": 1,
    "TG": 3,
    "TN": 2,
    "UG": 2,
    "ZM": 2,
    "ZW": 2,
    # North America
    "AG": 3,
    "BS": 3,
    "BB": 3,
    "BZ": 3,
    "CA": 1,
    "CR": 2,
    "CU": 1,
    "DM": 3,
    "DO": 2,
    "SV": 3,
    "GD": 3,
    "GT": 2,
    "HT": 2,
    "HN": 3,
    "JM": 2,
    "MX": 1,
    "NI": 3,
    "PA": 2,
    "KN": 3,
    "LC": 3,
    "VC": 3,
    "TT": 3,
    "US": 1,
    # South America
    "AR": 1,
    "BO": 2,
    "BR": 1,
    "CL": 1,
    "CO": 1,
    "EC": 2,
    "GY": 3,
    "PY": 2,
    "PE": 1,
    "SR": 3,
    "UY": 2,
    "VE": 1,
    "GF": 3,
    # Oceania
    "AU": 1,
    "FJ": 3,
    "NZ": 1,
    "PG": 2,
    "WS": 3,
    "SB": 3,
    "TO": 3,
    "VU": 3,
}

MAX_TIER_BY_DIFFICULTY: dict[Difficulty, int] = {
    Difficulty.EASY: 1,
    Difficulty.MEDIUM: 2,
    Difficulty.HARD: 3,
}


def max_tier_for_difficulty(difficulty: Difficulty) -> int:
    return MAX_TIER_BY_DIFFICULTY[Difficulty(difficulty)]
