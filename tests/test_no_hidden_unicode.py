from pathlib import Path

# Bidi controls that can hide what a line of source really does
BIDI_CHARS = set([
    '\u202A', '\u202B', '\u202C', '\u202D', '\u202E',  # LRE, RLE, PDF, LRO, RLO
    '\u2066', '\u2067', '\u2068', '\u2069',            # LRI, RLI, FSI, PDI
    '\u200E', '\u200F'                                 # LRM, RLM
])

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_no_hidden_unicode():
    """
    Every python source under minigrep/ and tests/ decodes as UTF-8
    and contains no bidi control characters.
    """
    found_issues = []

    for package_dir in ("minigrep", "tests"):
        for path in sorted((REPO_ROOT / package_dir).rglob("*.py")):
            content = path.read_text(encoding="utf-8")
            for lineno, line in enumerate(content.splitlines(), start=1):
                for char in line:
                    if char in BIDI_CHARS:
                        found_issues.append(f"{path.relative_to(REPO_ROOT)}:{lineno}: U+{ord(char):04X}")

    assert not found_issues, "Found hidden/bidi unicode characters:\n" + "\n".join(found_issues)
