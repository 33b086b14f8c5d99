import pytest

from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.grammars import (
    GRAMMARS,
    build_entry,
    is_header_line,
    match_line,
    section_from_speaker,
)


def test_cascade_order():
    assert [g.name for g in GRAMMARS] == [
        "bracketed",
        "timestamp_first",
        "speaker_first",
        "dash",
        "embedded",
        "plain_text",
    ]


def test_bracketed_line():
    entry = match_line("[00:01:23] Interviewer: Hello and welcome", 1)
    assert entry == TranscriptEntry("00:01:23", "interviewer", "Hello and welcome")


def test_timestamp_first_line():
    entry = match_line("00:00:18 Interviewer: Can you tell me more?", 3)
    assert entry == TranscriptEntry("00:00:18", "interviewer", "Can you tell me more?")


def test_speaker_first_line():
    entry = match_line("Candidate: [00:00:25] I worked as a developer.", 4)
    assert entry == TranscriptEntry("00:00:25", "candidate", "I worked as a developer.")


def test_dash_line():
    entry = match_line("00:01:02-Interviewer: What did you enjoy?", 5)
    assert entry == TranscriptEntry("00:01:02", "interviewer", "What did you enjoy?")


def test_spaced_dash_line_is_claimed_by_earlier_grammar():
    # Grammar 2 comes first and accepts "- Interviewer" as the speaker label.
    entry = match_line("00:01:02 - Interviewer: What did you enjoy?", 5)
    assert entry is not None
    assert entry.section == "-_interviewer"


def test_embedded_timestamp():
    entry = match_line("Recorded at 00:12:30 the team discussed budgets", 2)
    assert entry == TranscriptEntry("00:12:30", "unknown_speaker", "the team discussed budgets")


def test_embedded_timestamp_needs_enough_content():
    with pytest.raises(TranscriptParseError):
        match_line("Note 00:12:30 ok fine", 2)


def test_plain_text_gets_ten_second_steps():
    entry = match_line("This is a long narrative line without any colon", 4)
    assert entry == TranscriptEntry("00:00:30", "speaker", "This is a long narrative line without any colon")


def test_plain_text_requires_uppercase_start():
    with pytest.raises(TranscriptParseError):
        match_line("this is a long narrative line without any colon", 1)


@pytest.mark.parametrize("line", ["Abc", "12.", "1234.", "Interview transcript", "TRANSCRIPT START here"])
def test_header_lines_are_skipped(line):
    assert is_header_line(line)
    assert match_line(line, 1) is None


def test_unmatched_line_lists_supported_shapes():
    with pytest.raises(TranscriptParseError) as exc_info:
        match_line("well: i guess that is all", 7)

    exc = exc_info.value
    assert exc.code == ErrorCode.INVALID_FILE_FORMAT
    assert exc.line == 7
    assert "[HH:MM:SS] Speaker: Content" in exc.message
    assert "HH:MM:SS - Speaker: Content" in exc.message


def test_out_of_range_timestamp_is_rejected():
    with pytest.raises(TranscriptParseError) as exc_info:
        match_line("[25:00:00] Bob: Hello there", 1)
    assert "Invalid timestamp format: 25:00:00" in exc_info.value.message


def test_section_from_speaker():
    assert section_from_speaker("  Speaker   One ") == "speaker_one"
    assert section_from_speaker("Dr. Smith") == "dr._smith"


def test_build_entry_rejects_blank_speaker_and_content():
    with pytest.raises(TranscriptParseError, match="Speaker cannot be empty"):
        build_entry("00:00:01", "  ", "content", 1)
    with pytest.raises(TranscriptParseError, match="Content cannot be empty"):
        build_entry("00:00:01", "bob", "   ", 1)


def test_non_ascii_digits_are_not_timestamps():
    with pytest.raises(TranscriptParseError, match="Invalid line format"):
        match_line("[٠٠:٠٠:٠٥] Alice: hello there", 1)
