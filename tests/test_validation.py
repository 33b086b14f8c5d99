from transcript_analyzer.sample_data import SAMPLE_SPEECH_TO_TEXT_CONTENT, SAMPLE_TRANSCRIPT_CONTENT
from transcript_analyzer.transcripts.base import TranscriptEntry
from transcript_analyzer.transcripts.validation import (
    has_canonical_line,
    validate_section_name,
    validate_timestamp,
    validate_transcript_entries,
    validate_transcript_entry,
    validate_transcript_format,
)


def test_valid_entry():
    result = validate_transcript_entry(TranscriptEntry("00:01:00", "introduction", "Welcome to the meeting"))
    assert result.is_valid
    assert result.errors == []
    assert result.warnings == []


def test_invalid_entry_collects_all_errors():
    result = validate_transcript_entry(TranscriptEntry("25:00:00", "user-feedback", "   "))

    assert not result.is_valid
    assert len(result.errors) == 3
    assert 'Invalid timestamp format: "25:00:00"' in result.errors[0]
    assert 'Invalid section name: "user-feedback"' in result.errors[1]
    assert result.errors[2] == "Content cannot be empty."


def test_short_content_is_a_warning():
    result = validate_transcript_entry(TranscriptEntry("00:00:01", "intro", "Hi"))

    assert result.is_valid
    assert result.warnings == ['Very short content in section "intro": "Hi"']


def test_timestamp_is_not_trimmed():
    assert validate_timestamp("00:00:01")
    assert not validate_timestamp(" 00:00:01")


def test_section_names():
    assert validate_section_name("section_2")
    assert not validate_section_name("user-feedback")
    assert not validate_section_name("")


def test_empty_entry_list():
    result = validate_transcript_entries([])
    assert not result.is_valid
    assert result.errors == ["Transcript must contain at least one entry."]


def test_duplicates_and_order():
    result = validate_transcript_entries(
        [
            TranscriptEntry("00:01:00", "intro", "First statement here"),
            TranscriptEntry("00:00:30", "intro", "Second statement here"),
            TranscriptEntry("00:00:30", "intro", "Third statement here"),
        ]
    )

    assert result.is_valid
    assert result.warnings == [
        "Duplicate timestamps found: 00:00:30",
        "Timestamps not in chronological order: 00:01:00 comes after 00:00:30",
    ]


def test_entry_errors_are_prefixed_with_position():
    result = validate_transcript_entries(
        [
            TranscriptEntry("00:00:01", "intro", "First statement here"),
            TranscriptEntry("00:00:02", "bad-name", "Second statement here"),
        ]
    )

    assert not result.is_valid
    assert result.errors[0].startswith("Line 2: Invalid section name")


def test_hyphenated_sample_sections_are_reported():
    from transcript_analyzer.transcripts.strict_parser import parse_transcript

    result = validate_transcript_entries(parse_transcript(SAMPLE_TRANSCRIPT_CONTENT))
    assert not result.is_valid
    assert any("user-feedback" in e for e in result.errors)


def test_format_check():
    result = validate_transcript_format("- 00:00:01 intro Hello there\n\nnot a transcript line\n")

    assert not result.is_valid
    assert result.errors == [
        'Line 2: Invalid format. Expected "- HH:MM:SS section_name content" but got: "not a transcript line"'
    ]


def test_format_check_empty():
    for content in ("", "  \n ", None):
        result = validate_transcript_format(content)
        assert result.errors == ["Transcript content cannot be empty."]


def test_format_check_accepts_canonical_text():
    assert validate_transcript_format("- 00:00:01 intro Hello there\n- 00:00:05 main Second line").is_valid


def test_has_canonical_line():
    assert has_canonical_line("noise\n- 00:00:01 intro Hello there")
    assert not has_canonical_line(SAMPLE_SPEECH_TO_TEXT_CONTENT)
    assert not has_canonical_line("- 25:00:00 intro Out of range")
    assert not has_canonical_line(None)


def test_trailing_newline_is_not_accepted():
    assert not validate_timestamp("00:00:10\n")
    assert not validate_section_name("intro\n")

    result = validate_transcript_entry(TranscriptEntry("00:00:10\n", "intro\n", "Long enough content here"))
    assert not result.is_valid
    assert len(result.errors) == 2


def test_format_check_sections_are_ascii_only():
    result = validate_transcript_format("- 00:00:10 café Bonjour tout le monde")
    assert not result.is_valid
    assert not validate_section_name("café")


def test_blank_content_is_both_error_and_warning():
    result = validate_transcript_entry(TranscriptEntry("00:00:01", "intro", "   "))

    assert result.errors == ["Content cannot be empty."]
    assert result.warnings == ['Very short content in section "intro": "   "']
