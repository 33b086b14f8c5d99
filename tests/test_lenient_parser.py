import pytest

from transcript_analyzer.sample_data import SAMPLE_SPEECH_TO_TEXT_CONTENT
from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.lenient_parser import (
    LenientEntryParser,
    fallback_entries,
    parse_transcript_from_text,
)


MOSTLY_GOOD = (
    "[00:00:05] Alice: Hello there everyone, welcome.\n"
    "00:00:09 Bob: Thanks Alice, glad to be here.\n"
    "well: i guess that is all we have\n"
    "ok so um, we should wrap up now"
)


def test_speech_to_text_sample():
    entries = parse_transcript_from_text(SAMPLE_SPEECH_TO_TEXT_CONTENT)

    assert [e.timestamp for e in entries] == ["00:00:05", "00:00:12", "00:00:18", "00:00:25", "00:01:02"]
    assert [e.section for e in entries] == ["interviewer", "candidate", "interviewer", "candidate", "interviewer"]
    assert entries[3].content == "I have worked as a backend developer for six years."


def test_clean_input_does_not_use_fallback():
    entries = parse_transcript_from_text("[00:00:01] A: First line here\n[00:00:02] B: Second line here")
    assert all(e.section != "transcript" for e in entries)
    assert len(entries) == 2


def test_append_policy_keeps_cascade_entries_and_repeats_lines():
    entries = parse_transcript_from_text(MOSTLY_GOOD)

    assert len(entries) == 6
    assert entries[0] == TranscriptEntry("00:00:05", "alice", "Hello there everyone, welcome.")
    assert entries[1] == TranscriptEntry("00:00:09", "bob", "Thanks Alice, glad to be here.")
    assert [e.timestamp for e in entries[2:]] == ["00:00:00", "00:00:08", "00:00:16", "00:00:24"]
    assert all(e.section == "transcript" for e in entries[2:])
    assert entries[2].content == "[00:00:05] Alice: Hello there everyone, welcome."


def test_dedupe_policy_skips_parsed_lines():
    entries = parse_transcript_from_text(MOSTLY_GOOD, fallback="dedupe")

    assert len(entries) == 4
    assert entries[2] == TranscriptEntry("00:00:00", "transcript", "well: i guess that is all we have")
    assert entries[3] == TranscriptEntry("00:00:08", "transcript", "ok so um, we should wrap up now")


def test_replace_policy_returns_only_fallback_entries():
    entries = parse_transcript_from_text(MOSTLY_GOOD, fallback="replace")

    assert len(entries) == 4
    assert all(e.section == "transcript" for e in entries)


def test_too_many_bad_lines_raise_aggregated_error():
    content = (
        "[00:00:05] Alice: Hello there everyone, welcome.\n"
        "well: i guess that is all\n"
        "ok so um, we should wrap up\n"
        "and: another broken line\n"
        "yet: one more broken line"
    )

    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript_from_text(content)

    exc = exc_info.value
    assert exc.code == ErrorCode.INVALID_FILE_FORMAT
    assert exc.message.startswith("Failed to parse transcript. Errors found:")
    assert "Line 2:" in exc.message
    assert "Line 5:" in exc.message


def test_only_header_lines_raise():
    with pytest.raises(TranscriptParseError, match="No valid transcript entries found"):
        parse_transcript_from_text("Interview transcript\n\n12.")


@pytest.mark.parametrize("content", [None, "", "   "])
def test_rejects_invalid_input(content):
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript_from_text(content)
    assert exc_info.value.code == ErrorCode.INVALID_FILE_FORMAT


def test_unknown_fallback_policy():
    with pytest.raises(ValueError, match="Unknown fallback policy"):
        LenientEntryParser(fallback="merge")


def test_fallback_entries_skip_short_and_header_lines():
    entries = fallback_entries("Generated by ASR\nHi\n3.\nActual words spoken here\nMore words spoken here")

    assert [e.content for e in entries] == ["Actual words spoken here", "More words spoken here"]
    assert [e.timestamp for e in entries] == ["00:00:00", "00:00:08"]
