#!/usr/bin/env python3
"""
Example: Spelling pitches in a key.

This demonstrates how the line-of-fifths types answer notation questions:
which letter and accidental to write for a pitch, and how transposition
keeps or loses a notatable spelling.

Usage:
    python examples/spell_in_key.py
"""

from tonality import Interval, Key, Prefer, Speller, SpellingConfig, Step, Tpc


def main() -> None:
    """Demonstrate spelling and transposition."""
    print("Tonality Spelling Demo")
    print("=" * 40)
    print()

    # Which accidental is used for A flat in B flat major?
    step, accidental = Tpc.Ab.altered_step(Key.Bb)
    print(f"A flat in {Key.Bb}: step {step}, accidental {accidental!r}")

    # Diatonic spelling of each letter in D major
    print(f"Letters in {Key.D}: {' '.join(str(s.with_key(Key.D)) for s in Step)}")
    print()

    # A chromatic line spelled three ways in E flat major
    chromatic = list(range(60, 72))
    for prefer in Prefer:
        speller = Speller(SpellingConfig(key="Eb", prefer=prefer))
        notes = [speller.notate(tpc) for tpc in speller.spell_all(chromatic)]
        print(f"  {prefer.value:>7}: {' '.join(notes)}")
    print()

    # Transposition keeps enharmonic identity, or fails if inexpressible
    for tpc, interval in [
        (Tpc.C, Interval.Maj3),
        (Tpc.Fs, Interval.Dim5),
        (Tpc.Dss, Interval.Maj3),
    ]:
        result = tpc + interval
        if result is None:
            print(f"{tpc} + {interval}: no notatable spelling")
        else:
            print(f"{tpc} + {interval} = {result}")


if __name__ == "__main__":
    main()
