#!/usr/bin/env python3
"""Print every catalog word in every form it is drilled in.

Usage:
    python scripts/conjugation_table.py [kind ...]
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from services import (
    Script,
    all_lexemes,
    conjugate_all,
    display_label,
    expected_display,
    filter_by_kind,
    validate_catalog,
)


def main(argv: list[str]) -> int:
    lexemes = filter_by_kind(argv) if argv else all_lexemes()
    validate_catalog(lexemes)

    for lex in lexemes:
        print("=" * 60)
        kind = f"{lex.kind} ({lex.verb_class})" if lex.verb_class else str(lex.kind)
        print(f"{expected_display(lex.kana, lex.kanji)} - {lex.meaning} - {kind}")
        print("=" * 60)
        kana_forms = conjugate_all(lex, Script.PHONETIC)
        kanji_forms = conjugate_all(lex, Script.ORTHOGRAPHIC)
        for form, kana in kana_forms.items():
            print(f"  {display_label(form)}")
            print(f"    {expected_display(kana, kanji_forms[form])}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
