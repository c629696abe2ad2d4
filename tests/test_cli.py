from regextrie.cli import main


def _run(capsys):
    code = main([])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_main_succeeds_without_errors(capsys):
    code, out, err = _run(capsys)
    assert code == 0
    assert err == ""
    assert out.count("Inserting patterns...") == 4


def test_first_input_matches_sorted(capsys):
    _, out, _ = _run(capsys)
    lines = out.splitlines()
    start = lines.index('Input string: "helloabctest"')
    block = lines[start + 3 : start + 7]
    expected = ["hello.*", "hello.*test", "hello[a-z]+test", ".*test"]
    assert block == [f"  - {p}" for p in sorted(expected)]


def test_second_input_matches_number_pattern(capsys):
    _, out, _ = _run(capsys)
    lines = out.splitlines()
    start = lines.index('Input string: "something12345"')
    assert lines[start + 3] == "  - something[0-9]+"
    assert lines[start + 4] == ""


def test_test_input_matches_every_pattern(capsys):
    _, out, _ = _run(capsys)
    lines = out.splitlines()
    start = lines.index('Input string: "test"')
    block = lines[start + 3 : start + 10]
    expected = [".*", ".*test", "test", "test.*", ".*test.*", ".*(test).*", ".*(test|toto).*"]
    assert sorted(block) == sorted(f"  - {p}" for p in expected)


def test_url_input_matches(capsys):
    _, out, _ = _run(capsys)
    lines = out.splitlines()
    starts = [i for i, line in enumerate(lines) if line == 'Input string: "https://google.com/user/1234"']
    assert len(starts) == 2
    first = starts[0]
    found = sorted(lines[first + 3 : first + 5])
    assert found == ["  - https://google.com/.*", "  - https://google.com/user/.*"]
    assert "  - https://facebook.com" not in out
    second = starts[1]
    assert lines[second + 3 :] == ["  - .*"]