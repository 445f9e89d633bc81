"""Parameter resolution for vCard 2.1 and 3.0 style parameters.

3.0 names every parameter (``TYPE=HOME,VOICE``). 2.1 allows bare values
(``HOME;VOICE``) whose name has to be inferred from the value itself.
"""

from .splitter import split_by_comma

# ---------------------------------------------------------------------------
# vCard 2.1 bare parameter values
# ---------------------------------------------------------------------------

TYPE_TOKENS = frozenset(
    {
        # addresses and phones
        "DOM",
        "INTL",
        "POSTAL",
        "PARCEL",
        "HOME",
        "WORK",
        "PREF",
        "VOICE",
        "FAX",
        "MSG",
        "CELL",
        "PAGER",
        "BBS",
        "MODEM",
        "CAR",
        "ISDN",
        "VIDEO",
        # email
        "AOL",
        "APPLELINK",
        "ATTMAIL",
        "CIS",
        "EWORLD",
        "INTERNET",
        "IBMMAIL",
        "MCIMAIL",
        "POWERSHARE",
        "PRODIGY",
        "TLX",
        "X400",
        # images
        "GIF",
        "CGM",
        "WMF",
        "BMP",
        "MET",
        "PMB",
        "DIB",
        "PICT",
        "TIFF",
        "PDF",
        "PS",
        "JPEG",
        "QTIME",
        "MPEG",
        "MPEG2",
        "AVI",
        # sounds
        "WAVE",
        "AIFF",
        "PCM",
        # keys
        "X509",
        "PGP",
    }
)

VALUE_TOKENS = frozenset({"INLINE", "URL", "CID", "CONTENT-ID"})

ENCODING_TOKENS = frozenset({"7BIT", "8BIT", "QUOTED-PRINTABLE", "BASE64"})


def param_name(token: str) -> str:
    """Name of the parameter a bare 2.1 value belongs to.

    Unrecognized tokens name themselves.
    """
    if token in TYPE_TOKENS:
        return "TYPE"
    if token in VALUE_TOKENS:
        return "VALUE"
    if token in ENCODING_TOKENS:
        return "ENCODING"
    return token


def resolve_params(raw_params: list[str]) -> dict[str, list[str]]:
    """Build the parameter name -> values mapping for one content line.

    Both ``TYPE=HOME,VOICE`` and ``HOME;VOICE`` resolve to
    ``{"TYPE": ["HOME", "VOICE"]}``. Repeated names accumulate in input
    order.
    """
    params: dict[str, list[str]] = {}

    for raw in raw_params:
        if not raw.strip():
            continue
        key, _, listall = raw.partition("=")
        key = key.strip().upper()

        values = [v.strip() for v in split_by_comma(listall.strip())]
        values = [v for v in values if v]

        if values:
            params.setdefault(key, []).extend(values)
        else:
            params.setdefault(param_name(key), []).append(key)

    # drop names that ended up without any value
    return {name: values for name, values in params.items() if values}
