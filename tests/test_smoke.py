from transcript_analyzer import smoke


def test_bundled_samples(capsys):
    assert smoke.main([]) == 0

    out = capsys.readouterr().out
    assert "Parser: strict" in out
    assert "Parser: lenient" in out
    assert "Duration: 00:15:30" in out


def test_strict_mode_fails_on_speech_sample(tmp_path, capsys):
    path = tmp_path / "speech.txt"
    path.write_text("[00:00:05] Interviewer: Welcome to the interview.\n", encoding="utf-8")

    assert smoke.main([str(path), "--mode", "strict", "--print-entries"]) == 2
    assert "PARSE ERROR" in capsys.readouterr().out
