"""Tests for bar segmentation."""

from fractions import Fraction
from unittest.mock import PropertyMock, patch

import pytest

from drumjot.duration import Duration, weight
from drumjot.engine.segmentation import rest_bar, segment_track, tie
from drumjot.errors import UnrepresentableDuration
from drumjot.fixtures import eighth, half, half_rest, quarter, quarter_rest
from drumjot.models.jot import NoteEvent, TimeSignature


def _bar_length(bar: list[NoteEvent]) -> Fraction:
    return sum((weight(n.duration) for n in bar), Fraction(0))


def _durations(bar: list[NoteEvent]) -> list[Duration]:
    return [n.duration for n in bar]


class TestSegmentTrack:
    """Tests for segment_track."""

    def test_sixteen_eighths(self, four_four: TimeSignature):
        """Sixteen eighths make two full bars with no splits."""
        bars = segment_track(four_four, [eighth] * 16)

        assert len(bars) == 2
        assert all(bar == [eighth] * 8 for bar in bars)

    def test_alternating_quarters(self, four_four: TimeSignature):
        """Rest/hit quarters fill two bars unchanged."""
        notes = [quarter_rest, quarter] * 4
        bars = segment_track(four_four, notes)

        assert bars == [[quarter_rest, quarter] * 2, [quarter_rest, quarter] * 2]

    def test_whole_then_half(self, four_four: TimeSignature):
        """A trailing half note is padded with a half rest."""
        whole = NoteEvent(Duration.WHOLE)
        bars = segment_track(four_four, [whole, half])

        assert bars == [[whole], [half, half_rest]]

    def test_empty_track_is_one_rest_bar(self, four_four: TimeSignature):
        """A track without notes still renders one bar."""
        assert segment_track(four_four, []) == [[NoteEvent.rest_of(Duration.WHOLE)]]

    def test_no_trailing_bar_after_exact_fill(self, four_four: TimeSignature):
        """Tracks ending on a bar line get no extra bar."""
        bars = segment_track(four_four, [quarter] * 12)
        assert len(bars) == 3

    @pytest.mark.parametrize("count", [1, 2, 3, 5])
    def test_exact_multiples(self, four_four: TimeSignature, count: int):
        """totalLength / barLength bars, each exactly full."""
        bars = segment_track(four_four, [half] * (2 * count))
        assert len(bars) == count
        assert all(_bar_length(bar) == 4 for bar in bars)

    def test_straddling_note_is_tied(self, four_four: TimeSignature):
        """A note over the bar line splits into a head and rest tail."""
        accented = NoteEvent(Duration.HALF, accent=True)
        notes = [quarter, quarter, quarter, accented]

        bars = segment_track(four_four, notes)

        assert bars[0] == [quarter, quarter, quarter, NoteEvent(Duration.QUARTER, accent=True)]
        assert bars[1] == [quarter_rest, NoteEvent.rest_of(Duration.HALF), quarter_rest]

    def test_tied_fragments_sum_to_original(self, four_four: TimeSignature):
        """Before and after fragments add up to the note's length."""
        notes = [NoteEvent(Duration.QUARTER), NoteEvent(Duration.SIXTEENTH)] * 3
        notes.append(NoteEvent(Duration.WHOLE))

        bars = segment_track(four_four, notes)

        total = sum(_bar_length(bar) for bar in bars)
        written = sum(weight(n.duration) for n in notes)
        assert total == written + (4 - written % 4) % 4
        # head of the whole note closes bar 1, its tail opens bar 2
        head = bars[0][6:]
        tail = bars[1][: len(bars[1]) - 1]
        assert _bar_length(head) + _bar_length(tail) == 4
        assert head[0].rest is False
        assert all(n.rest for n in head[1:] + tail)

    def test_total_length_round_trips(self, four_four: TimeSignature):
        """Concatenated fragments reproduce the track's total length."""
        notes = [NoteEvent(Duration.HALF)] + [NoteEvent(Duration.WHOLE)] * 3 + [half]
        bars = segment_track(four_four, notes)

        assert sum(_bar_length(bar) for bar in bars) == 16
        assert all(_bar_length(bar) == 4 for bar in bars)

    def test_overflow_of_one_quarter(self):
        """A half note over a 3/4 bar line leaves a quarter rest."""
        three_four = TimeSignature(3, Duration.QUARTER)
        accent_rest = NoteEvent(Duration.HALF, accent=True, rest=True)
        bars = segment_track(three_four, [quarter, quarter, accent_rest])

        assert bars[0] == [quarter, quarter, NoteEvent(Duration.QUARTER, accent=True, rest=True)]
        assert bars[1][0] == quarter_rest
        assert bars[1][0].accent is False

    def test_note_longer_than_a_bar(self):
        """A whole note in 2/4 fills its bar and the next with rests."""
        two_four = TimeSignature(2, Duration.QUARTER)
        whole = NoteEvent(Duration.WHOLE)
        bars = segment_track(two_four, [quarter, whole, quarter])

        assert [_durations(b) for b in bars] == [
            [Duration.QUARTER, Duration.QUARTER],
            [Duration.HALF],
            [Duration.QUARTER, Duration.QUARTER],
        ]
        assert bars[0][1].rest is False
        assert bars[1][0].rest is True
        assert bars[2] == [quarter_rest, quarter]

    def test_overflow_of_several_bars_never_overfills(self):
        """A whole note in 1/4 leaves three single-beat rest bars behind it."""
        one_four = TimeSignature(1, Duration.QUARTER)
        bars = segment_track(one_four, [NoteEvent(Duration.WHOLE)])

        assert len(bars) == 4
        assert all(sum(n.length for n in bar) == 1 for bar in bars)
        assert bars[0] == [quarter]
        assert all(bar == [quarter_rest] for bar in bars[1:])

    def test_tie_keeps_rhythm_divisor_on_head(self, four_four: TimeSignature):
        """The first fragment inherits every field of the note."""
        triplet = NoteEvent(Duration.HALF, accent=True, rhythm_divisor=3)
        bars = segment_track(four_four, [half, quarter, triplet])

        assert bars[0][-1] == NoteEvent(Duration.QUARTER, accent=True, rhythm_divisor=3)
        assert bars[1][0].rhythm_divisor is None

    def test_does_not_mutate_input(self, four_four: TimeSignature):
        """The note list is left untouched."""
        notes = [quarter, half]
        segment_track(four_four, notes)
        assert notes == [quarter, half]

    def test_compound_length_note(self, four_four: TimeSignature):
        """A five-quarter note keeps a whole-note head and a quarter rest tail."""
        note = NoteEvent(Duration.WHOLE, accent=True)
        with patch.object(NoteEvent, "length", new_callable=PropertyMock, return_value=Fraction(5)):
            bars = segment_track(four_four, [note])

        assert bars[0] == [NoteEvent(Duration.WHOLE, accent=True)]
        assert bars[1][0] == quarter_rest
        assert _durations(bars[1]) == [Duration.QUARTER, Duration.HALF, Duration.QUARTER]

    def test_sixteenth_bars(self):
        """A quarter note in 1/16 time spans four one-sixteenth bars."""
        odd = TimeSignature(1, Duration.SIXTEENTH)
        bars = segment_track(odd, [quarter])

        assert len(bars) == 4
        assert bars[0] == [NoteEvent(Duration.SIXTEENTH)]
        assert all(bar == [NoteEvent.rest_of(Duration.SIXTEENTH)] for bar in bars[1:])

    def test_unrepresentable_split_aborts(self, four_four: TimeSignature):
        """A failed decomposition fails the whole track."""
        error = UnrepresentableDuration(Fraction(1, 3))
        with patch("drumjot.engine.segmentation.minimal_decompose", side_effect=error):
            with pytest.raises(UnrepresentableDuration):
                segment_track(four_four, [quarter] * 3 + [half])


class TestHelpers:
    """Tests for tie and rest_bar."""

    def test_tie_without_durations(self):
        """Tying into nothing yields no fragments."""
        assert tie(quarter, []) == []

    def test_tie_head_then_rests(self):
        """Only the head of a tie sounds."""
        note = NoteEvent(Duration.WHOLE, accent=True)
        fragments = tie(note, [Duration.HALF, Duration.EIGHTH])
        assert fragments == [
            NoteEvent(Duration.HALF, accent=True),
            NoteEvent.rest_of(Duration.EIGHTH),
        ]

    def test_rest_bar(self):
        """A rest bar is the minimal decomposition of the bar length."""
        bar = rest_bar(TimeSignature(7, Duration.EIGHTH))
        assert _durations(bar) == [Duration.HALF, Duration.QUARTER, Duration.EIGHTH]
        assert all(n.rest for n in bar)
