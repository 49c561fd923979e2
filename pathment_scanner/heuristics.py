"""
Static reference sets used to disambiguate tokens.

All entries are lower case and stored without a leading dot.  The sets are
curated, not exhaustive: ``CURATED_TLDS`` covers the top-level domains seen in
everyday pasted text, ``COMMON_FILE_EXTENSIONS`` lists extensions that should
stop a token like ``archive.zip`` from being read as a domain name.
"""

CURATED_TLDS: frozenset[str] = frozenset({
    # Legacy generic TLDs
    "com", "org", "net", "edu", "gov", "mil", "int",

    # Common modern gTLDs
    "app", "ai", "biz", "info", "io", "dev", "tech", "xyz", "online", "site",
    "tv", "cloud", "shop", "store", "blog", "news", "art", "design", "wiki",
    "agency", "consulting", "expert", "foundation", "global", "group", "studio",

    # Geographic and regional
    "asia", "berlin", "boston", "london", "nyc", "paris", "tokyo", "earth", "lat",

    # Country codes; md, py, rs and so lose to COMMON_FILE_EXTENSIONS
    "ac", "ad", "ae", "af", "ag", "al", "am", "at", "au", "az", "ba", "be",
    "bg", "bh", "bi", "bj", "bo", "br", "bs", "by", "ca", "cc", "cd", "ch",
    "ci", "cl", "cm", "cn", "co", "cr", "cu", "cv", "cy", "cz", "de", "dk",
    "dm", "do", "dz", "ec", "ee", "eg", "es", "et", "eu", "fi", "fm", "fr",
    "ga", "ge", "gg", "gh", "gl", "gm", "gr", "gt", "gy", "hk", "hn", "hr",
    "ht", "hu", "id", "ie", "il", "im", "in", "ir", "is", "it", "je", "jm",
    "jo", "jp", "ke", "kg", "kh", "kr", "kw", "kz", "la", "lb", "li", "lk",
    "lt", "lu", "lv", "ly", "ma", "mc", "md", "me", "mg", "mk", "ml", "mn",
    "mo", "mt", "mu", "mv", "mx", "my", "na", "ng", "ni", "nl", "no", "np",
    "nz", "om", "pa", "pe", "ph", "pk", "pl", "pr", "pt", "py", "qa", "ro",
    "rs", "ru", "rw", "sa", "se", "sg", "si", "sk", "sm", "sn", "so", "st",
    "sv", "sy", "tc", "td", "tg", "th", "tn", "to", "tr", "tt", "tw", "ua",
    "ug", "uk", "us", "uy", "uz", "vc", "ve", "vn", "vu", "ws", "ye", "za",
    "zm", "zw",
})

# "ai" and "app" stay out of this set so example.ai and example.app are hosts.
COMMON_FILE_EXTENSIONS: frozenset[str] = frozenset({
    # Documents and text
    "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods", "odp",
    "txt", "rtf", "csv", "md", "tex", "epub", "mobi",

    # Archives
    "zip", "rar", "7z", "tar", "gz", "bz2", "xz", "iso",

    # Images
    "jpg", "jpeg", "png", "gif", "bmp", "svg", "webp", "tiff", "psd", "ico",

    # Audio / video
    "mp3", "wav", "flac", "aac", "ogg", "m4a",
    "mp4", "mkv", "avi", "mov", "wmv", "flv", "webm",

    # Code and scripts
    "java", "js", "ts", "html", "htm", "css", "scss", "php", "py", "rb", "go",
    "rs", "c", "cpp", "h", "cs", "swift", "kt", "kts", "sh", "bat", "ps1", "vbs",

    # Executables and libraries
    "exe", "dll", "so", "dmg", "jar", "msi",

    # Data and configuration
    "xml", "json", "yml", "yaml", "ini", "conf", "cfg", "log", "db", "sqlite",
    "sql", "bak", "tmp",

    # Server pages
    "asp", "aspx", "jsp", "xhtml",

    # Ambiguous leftovers
    "class", "method", "obj", "dat", "bin",
})


def is_curated_tld(label: str) -> bool:
    return label.lower() in CURATED_TLDS


def is_common_file_extension(extension: str) -> bool:
    return extension.lower().lstrip(".") in COMMON_FILE_EXTENSIONS


def looks_like_domain(host: str) -> bool:
    """
    True when the last label of *host* is a curated TLD that is not also a
    common file extension (``example.com`` yes, ``notes.md`` / ``setup.py`` no).
    """
    if "." not in host:
        return False
    tld = host.rsplit(".", 1)[1]
    return is_curated_tld(tld) and not is_common_file_extension(tld)
