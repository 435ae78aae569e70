"""
Entry point for running as a module: python -m voclist

Usage:
    python -m voclist                          # Run web app
    python -m voclist --correct speling        # Correct one word
    python -m voclist --reconcile w1 w2 ...    # Correct a list of words
    python -m voclist --grab "some text"       # Find the vocabulary in a text
"""

import sys


def _values_after(args, flag):
    """Arguments following ``flag`` up to the next flag."""
    values = []
    for arg in args[args.index(flag) + 1:]:
        if arg.startswith('--'):
            break
        values.append(arg)
    return values


def main():
    args = sys.argv[1:]

    if '--help' in args or '-h' in args:
        print(__doc__)
        return 0

    if '--correct' in args or '--reconcile' in args or '--grab' in args:
        import requests
        from .api.client import VocabularyAPI
        from .correction.corrector import WordCorrector
        from .errors import VocabularyError, NoSuggestionsFound
        from .models import WordEntry

        api = VocabularyAPI(use_cache=True)
        corrector = WordCorrector.from_api(api)

        try:
            if '--correct' in args:
                words = _values_after(args, '--correct')
                if not words:
                    print("Usage: python -m voclist --correct WORD")
                    return 2
                for word in words:
                    try:
                        corrected = corrector.correct_word(word)
                    except NoSuggestionsFound as e:
                        print(f"  ✗ {e}")
                        continue
                    mark = "✏️ " if corrected != word else "✓"
                    print(f"  {mark} {word} -> {corrected}")

            elif '--reconcile' in args:
                words = _values_after(args, '--reconcile')
                result = corrector.reconcile([WordEntry(word=w) for w in words])
                print(f"\n📊 {len(result.words)} of {len(words)} words matched")
                for merged in result.words:
                    print(f"  - {merged.word}")
                if result.corrected:
                    print(f"✏️  Corrected: {', '.join(e.word for e in result.corrected)}")
                if result.not_found:
                    print(f"⚠ Not found: {', '.join(result.not_found)}")
                if result.not_learnable:
                    print(f"⚠ Not learnable: {', '.join(result.not_learnable)}")

            else:
                text = ' '.join(_values_after(args, '--grab'))
                grabbed = api.grab_words(text)
                for canonical in grabbed.words:
                    print(f"  - {canonical.word}: {canonical.definition}")
                if grabbed.not_found:
                    print(f"⚠ Not found: {', '.join(grabbed.not_found)}")

        except (VocabularyError, requests.RequestException) as e:
            print(f"⚠ {e}")
            return 1
        return 0

    # Run web app
    from .app import main as app_main
    app_main()
    return 0


if __name__ == '__main__':
    sys.exit(main())
