from transcript_analyzer.transcripts.base import TranscriptEntry
from transcript_analyzer.transcripts.stats import calculate_duration, count_words, get_unique_sections, summarize


ENTRIES = [
    TranscriptEntry("00:00:00", "introduction", "Welcome to the meeting"),
    TranscriptEntry("00:01:30", "agenda", "Today we will discuss the project"),
    TranscriptEntry("00:05:00", "introduction", "Back to intros"),
]


def test_duration_is_latest_timestamp():
    assert calculate_duration(ENTRIES) == "00:05:00"


def test_duration_ignores_entry_order():
    entries = [
        TranscriptEntry("00:16:15", "a", "Later statement"),
        TranscriptEntry("00:02:00", "b", "Earlier statement"),
    ]
    assert calculate_duration(entries) == "00:16:15"


def test_duration_is_normalized():
    assert calculate_duration([TranscriptEntry("1:23:45", "a", "Some text")]) == "01:23:45"


def test_duration_of_nothing():
    assert calculate_duration([]) is None


def test_word_count():
    assert count_words(ENTRIES) == 4 + 6 + 3
    assert count_words([TranscriptEntry("00:00:00", "a", "  spaced \t out\n words  ")]) == 3
    assert count_words([]) == 0


def test_unique_sections_sorted():
    assert get_unique_sections(ENTRIES) == ["agenda", "introduction"]
    assert get_unique_sections([]) == []


def test_summarize():
    assert summarize(ENTRIES) == {
        "total_duration": "00:05:00",
        "word_count": 13,
        "entry_count": 3,
        "sections": ["agenda", "introduction"],
    }


def test_duration_with_invalid_timestamp():
    entries = [
        TranscriptEntry("00:01:00", "a", "Valid statement"),
        TranscriptEntry("", "a", "content content"),
    ]

    assert calculate_duration(entries) is None
    assert summarize(entries)["total_duration"] is None
