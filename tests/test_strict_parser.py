import pytest

from transcript_analyzer.sample_data import SAMPLE_TRANSCRIPT_CONTENT
from transcript_analyzer.transcripts.base import ErrorCode, TranscriptEntry, TranscriptParseError
from transcript_analyzer.transcripts.strict_parser import StrictEntryParser, parse_transcript


def test_parses_valid_transcript_in_order():
    result = parse_transcript(
        "- 00:00:00 introduction Welcome to the meeting\n"
        "- 00:01:30 agenda Today we will discuss the project status\n"
        "- 00:05:00 discussion Let's start with the technical updates"
    )

    assert result == [
        TranscriptEntry("00:00:00", "introduction", "Welcome to the meeting"),
        TranscriptEntry("00:01:30", "agenda", "Today we will discuss the project status"),
        TranscriptEntry("00:05:00", "discussion", "Let's start with the technical updates"),
    ]


def test_two_lines_with_trimmed_content():
    result = parse_transcript("- 00:00:00 introduction Welcome\n- 00:01:30 agenda Today...   ")
    assert [e.content for e in result] == ["Welcome", "Today..."]
    assert [e.section for e in result] == ["introduction", "agenda"]


def test_extra_whitespace_and_blank_lines():
    result = parse_transcript(
        "  - 00:00:00   introduction   Welcome to the meeting  \n"
        "      \n"
        "-   00:01:30 agenda    Today we will discuss the project status   "
    )

    assert result == [
        TranscriptEntry("00:00:00", "introduction", "Welcome to the meeting"),
        TranscriptEntry("00:01:30", "agenda", "Today we will discuss the project status"),
    ]


@pytest.mark.parametrize("content", [None, 123, "", "   \n  "])
def test_rejects_invalid_input(content):
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript(content)
    assert exc_info.value.code == ErrorCode.INVALID_FILE_FORMAT


def test_hour_out_of_range_references_line():
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript("- 25:00:00 introduction Invalid timestamp")

    assert exc_info.value.code == ErrorCode.INVALID_FILE_FORMAT
    assert "Line 1: Invalid timestamp format: 25:00:00" in str(exc_info.value)


def test_uppercase_section_is_a_distinct_error():
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript("- 00:00:00  Welcome to the meeting")
    assert "Section name should be lowercase" in str(exc_info.value)


def test_missing_content_is_rejected():
    with pytest.raises(TranscriptParseError, match="Line 1: Invalid line format"):
        parse_transcript("- 00:00:00 introduction ")


def test_lines_without_grammar_fail():
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript("Invalid line 1\nAnother invalid line\nNo timestamps here")

    message = str(exc_info.value)
    assert "Line 1:" in message
    assert "Line 2:" in message
    assert "Line 3:" in message


def test_every_failing_line_is_reported():
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript(
            "- 00:00:00 intro Valid line\n"
            "- 25:00:00 invalid Invalid timestamp\n"
            "- 00:02:00 another Valid line\n"
            "- 00:03:00 Upper Case section"
        )

    exc = exc_info.value
    assert exc.code == ErrorCode.INVALID_FILE_FORMAT
    assert exc.line is None
    assert "Line 2" in exc.message
    assert "Line 4" in exc.message
    assert "Line 1" not in exc.message


def test_line_numbers_start_at_first_non_blank_line():
    with pytest.raises(TranscriptParseError, match="Line 2:"):
        parse_transcript("\n\n- 00:00:00 intro Fine\nbroken line")


def test_single_digit_hour_is_kept():
    assert parse_transcript("- 1:23:45 discussion This is a test") == [
        TranscriptEntry("1:23:45", "discussion", "This is a test")
    ]


def test_special_and_unicode_sections():
    assert parse_transcript("- 00:00:00 section_with-special.chars Content here")[0].section == (
        "section_with-special.chars"
    )

    entry = parse_transcript("- 00:00:00 测试 This is a test with unicode: 你好世界")[0]
    assert entry.section == "测试"
    assert entry.content == "This is a test with unicode: 你好世界"


def test_very_long_content():
    content = "A" * 10000
    assert parse_transcript(f"- 00:00:00 test {content}")[0].content == content


def test_mixed_line_endings():
    result = parse_transcript("- 00:00:00 intro First line\r\n- 00:01:00 middle Second line\n- 00:02:00 end Third line\r")
    assert len(result) == 3


def test_parsing_is_repeatable():
    parser = StrictEntryParser()
    assert parser.parse(SAMPLE_TRANSCRIPT_CONTENT) == parser.parse(SAMPLE_TRANSCRIPT_CONTENT)


def test_sample_transcript():
    entries = parse_transcript(SAMPLE_TRANSCRIPT_CONTENT)
    assert len(entries) == 10
    assert entries[0].timestamp == "00:00:15"
    assert entries[-1].section == "conclusion"


def test_non_ascii_digits_are_a_format_error():
    with pytest.raises(TranscriptParseError) as exc_info:
        parse_transcript("- ٠٠:٠٠:١٠ intro Arabic-Indic digits")

    assert "Line 1: Invalid line format" in exc_info.value.message
    assert "Invalid timestamp" not in exc_info.value.message
