from __future__ import annotations

# Land borders only. Island nations have no key.
ADJACENCY: dict[str, tuple[str, ...]] = {
    # Europe
    "AL": ("ME", "XK", "MK", "GR"),
    "AD": ("FR", "ES"),
    "AT": ("DE", "CZ", "SK", "HU", "SI", "IT", "CH", "LI"),
    "BY": ("PL", "LT", "LV", "RU", "UA"),
    "BE": ("FR", "LU", "DE", "NL"),
    "BA": ("HR", "RS", "ME"),
    "BG": ("RO", "RS", "MK", "GR", "TR"),
    "HR": ("SI", "HU", "RS", "BA", "ME"),
    "CZ": ("DE", "PL", "SK", "AT"),
    "DK": ("DE",),
    "EE": ("LV", "RU"),
    "FI": ("NO", "SE", "RU"),
    "FR": ("BE", "LU", "DE", "CH", "IT", "MC", "ES", "AD"),
    "DE": ("DK", "PL", "CZ", "AT", "CH", "FR", "LU", "BE", "NL"),
    "GR": ("AL", "MK", "BG", "TR"),
    "HU": ("AT", "SK", "UA", "RO", "RS", "HR", "SI"),
    "IE": ("GB",),
    "IT": ("FR", "CH", "AT", "SI", "SM", "VA"),
    "XK": ("RS", "MK", "AL", "ME"),
    "LV": ("EE", "LT", "RU", "BY"),
    "LI": ("AT", "CH"),
    "LT": ("LV", "BY", "PL", "RU"),
    "LU": ("BE", "DE", "FR"),
    "MK": ("RS", "BG", "GR", "AL", "XK"),
    "MD": ("RO", "UA"),
    "MC": ("FR",),
    "ME": ("HR", "BA", "RS", "XK", "AL"),
    "NL": ("BE", "DE"),
    "NO": ("SE", "FI", "RU"),
    "PL": ("DE", "CZ", "SK", "UA", "BY", "LT", "RU"),
    "PT": ("ES",),
    "RO": ("UA", "MD", "BG", "RS", "HU"),
    "RU": ("NO", "FI", "EE", "LV", "LT", "PL", "BY", "UA", "GE", "AZ", "KZ", "CN", "MN", "KP"),
    "SM": ("IT",),
    "RS": ("HU", "RO", "BG", "MK", "XK", "ME", "BA", "HR"),
    "SK": ("PL", "CZ", "AT", "HU", "UA"),
    "SI": ("IT", "AT", "HU", "HR"),
    "ES": ("PT", "FR", "AD", "MA"),
    "SE": ("NO", "FI"),
    "CH": ("DE", "FR", "IT", "AT", "LI"),
    "UA": ("PL", "SK", "HU", "RO", "MD", "BY", "RU"),
    "GB": ("IE",),
    "VA": ("IT",),
    # Asia
    "AF": ("PK", "IR", "TM", "UZ", "TJ", "CN"),
    "AM": ("GE", "AZ", "TR", "IR"),
    "AZ": ("RU", "GE", "AM", "IR", "TR"),
    "BD": ("IN", "MM"),
    "BT": ("IN", "CN"),
    "BN": ("MY",),
    "KH": ("TH", "LA", "VN"),
    "CN": ("RU", "MN", "KP", "VN", "LA", "MM", "IN", "BT", "NP", "PK", "AF", "TJ", "KG", "KZ"),
    "GE": ("RU", "AZ", "AM", "TR"),
    "IN": ("PK", "CN", "NP", "BT", "BD", "MM"),
    "ID": ("MY", "PG", "TL"),
    "IR": ("IQ", "TR", "AM", "AZ", "TM", "AF", "PK"),
    "IQ": ("TR", "SY", "JO", "SA", "KW", "IR"),
    "IL": ("LB", "SY", "JO", "EG", "PS"),
    "JO": ("SY", "IQ", "SA", "IL", "PS"),
    "KZ": ("RU", "CN", "KG", "UZ", "TM"),
    "KW": ("IQ", "SA"),
    "KG": ("KZ", "CN", "TJ", "UZ"),
    "LA": ("MM", "CN", "VN", "KH", "TH"),
    "LB": ("SY", "IL"),
    "MY": ("TH", "BN", "ID"),
    "MN": ("RU", "CN"),
    "MM": ("IN", "BD", "CN", "LA", "TH"),
    "NP": ("IN", "CN"),
    "KP": ("CN", "KR", "RU"),
    "OM": ("AE", "SA", "YE"),
    "PK": ("IN", "AF", "IR", "CN"),
    "PS": ("IL", "EG", "JO"),
    "QA": ("SA",),
    "SA": ("JO", "IQ", "KW", "QA", "AE", "OM", "YE"),
    "KR": ("KP",),
    "SY": ("TR", "IQ", "JO", "IL", "LB"),
    "TJ": ("KG", "CN", "AF", "UZ"),
    "TH": ("MM", "LA", "KH", "MY"),
    "TL": ("ID",),
    "TR": ("GR", "BG", "GE", "AM", "AZ", "IR", "IQ", "SY"),
    "TM": ("KZ", "UZ", "AF", "IR"),
    "AE": ("SA", "OM"),
    "UZ": ("KZ", "TJ", "KG", "AF", "TM"),
    "VN": ("CN", "LA", "KH"),
    "YE": ("SA", "OM"),
    # Africa
    "DZ": ("TN", "LY", "NE", "ML", "MR", "MA"),
    "AO": ("CD", "CG", "ZM", "NA"),
    "BJ": ("TG", "BF", "NE", "NG"),
    "BW": ("ZA", "NA", "ZM", "ZW"),
    "BF": ("ML", "NE", "BJ", "TG", "GH", "CI"),
    "BI": ("CD", "RW", "TZ"),
    "CM": ("NG", "TD", "CF", "CG", "GA", "GQ"),
    "CF": ("CM", "TD", "SD", "SS", "CD", "CG"),
    "TD": ("LY", "NE", "NG", "CM", "CF", "SD"),
    "CG": ("GA", "CM", "CF", "CD", "AO"),
    "CD": ("CG", "CF", "SS", "UG", "RW", "BI", "TZ", "ZM", "AO"),
    "CI": ("LR", "GN", "ML", "BF", "GH"),
    "DJ": ("ER", "ET", "SO"),
    "EG": ("IL", "PS", "LY", "SD"),
    "GQ": ("CM", "GA"),
    "ER": ("SD", "ET", "DJ"),
    "SZ": ("ZA", "MZ"),
    "ET": ("ER", "DJ", "SO", "KE", "SS", "SD"),
    "GA": ("CM", "GQ", "CG"),
    "GM": ("SN",),
    "GH": ("CI", "BF", "TG"),
    "GN": ("GW", "SN", "ML", "CI", "LR", "SL"),
    "GW": ("SN", "GN"),
    "KE": ("ET", "SO", "TZ", "UG", "SS"),
    "LS": ("ZA",),
    "LR": ("GN", "CI", "SL"),
    "LY": ("TN", "DZ", "NE", "TD", "SD", "EG"),
    "MW": ("TZ", "MZ", "ZM"),
    "ML": ("DZ", "NE", "BF", "CI", "GN", "SN", "MR"),
    "MR": ("MA", "DZ", "ML", "SN"),
    "MA": ("DZ", "MR", "ES"),
    "MZ": ("TZ", "MW", "ZM", "ZW", "ZA", "SZ"),
    "NA": ("AO", "ZM", "BW", "ZA"),
    "NE": ("DZ", "LY", "TD", "NG", "BJ", "BF", "ML"),
    "NG": ("BJ", "NE", "TD", "CM"),
    "RW": ("UG", "TZ", "BI", "CD"),
    "SN": ("MR", "ML", "GN", "GW", "GM"),
    "SL": ("GN", "LR"),
    "SO": ("ET", "DJ", "KE"),
    "ZA": ("NA", "BW", "ZW", "MZ", "SZ", "LS"),
    "SS": ("SD", "ET", "KE", "UG", "CD", "CF"),
    "SD": ("EG", "LY", "TD", "CF", "SS", "ET", "ER"),
    "TZ": ("KE", "UG", "RW", "BI", "CD", "ZM", "MW", "MZ"),
    "TG": ("GH", "BF", "BJ"),
    "TN": ("DZ", "LY"),
    "UG": ("SS", "KE", "TZ", "RW", "CD"),
    "ZM": ("CD", "TZ", "MW", "MZ", "ZW", "BW", "NA", "AO"),
    "ZW": ("ZM", "MZ", "ZA", "BW"),
    # North America
    "BZ": ("MX", "GT"),
    "CA": ("US",),
    "CR": ("NI", "PA"),
    "DO": ("HT",),
    "SV": ("GT", "HN"),
    "GT": ("MX", "BZ", "HN", "SV"),
    "HT": ("DO",),
    "HN": ("GT", "SV", "NI"),
    "MX": ("US", "GT", "BZ"),
    "NI": ("HN", "CR"),
    "PA": ("CR", "CO"),
    "US": ("CA", "MX"),
    # South America
    "AR": ("CL", "BO", "PY", "BR", "UY"),
    "BO": ("PE", "BR", "PY", "AR", "CL"),
    "BR": ("GF", "SR", "GY", "VE", "CO", "PE", "BO", "PY", "AR", "UY"),
    "CL": ("PE", "BO", "AR"),
    "CO": ("PA", "VE", "BR", "PE", "EC"),
    "EC": ("CO", "PE"),
    "GY": ("VE", "BR", "SR"),
    "PY": ("BO", "BR", "AR"),
    "PE": ("EC", "CO", "BR", "BO", "CL"),
    "SR": ("GY", "BR", "GF"),
    "UY": ("BR", "AR"),
    "VE": ("CO", "BR", "GY"),
    "GF": ("SR", "BR"),
    # Oceania
    "PG": ("ID",),
}

ISLAND_NATIONS: frozenset[str] = frozenset(
    {
        "IS", "MT", "CY", "BH", "MV", "SG", "LK", "JP", "TW", "PH",
        "KM", "MG", "MU", "SC", "ST", "CV",
        "AG", "BS", "BB", "CU", "DM", "GD", "JM", "KN", "LC", "VC", "TT",
        "AU", "NZ", "FJ", "WS", "SB", "TO", "VU",
    }
)
