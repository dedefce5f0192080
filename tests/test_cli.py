import pytest

from numerical_integration.cli import main


def _result(output: str, function_index: int, label: str) -> float:
    block = output.split(f'Function {function_index}:')[1]
    for line in block.splitlines():
        if line.startswith(label):
            return float(line[len(label):])
    raise AssertionError(f'{label} not found')


def test_main_with_options(capsys):
    assert main(['--start', '0', '--end', '1', '--subdivisions', '10000', '--seed', '0']) == 0
    output = capsys.readouterr().out
    assert '=== Numerical Integration Results ===' in output
    for index in range(1, 5):
        assert f'Function {index}: f(x) = ' in output
    assert output.count('Rectangle rule:    ') == 4
    assert output.count('Trapezoidal rule:  ') == 4
    assert output.count('Monte Carlo:       ') == 4
    # integral of 0.1x^3 + 2x^2 + 0.5x + 5 over [0, 1]
    assert _result(output, 3, 'Trapezoidal rule:') == pytest.approx(5.941667, abs=1e-5)
    assert _result(output, 3, 'Monte Carlo:') == pytest.approx(5.941667, abs=0.2)


def test_main_interactive(monkeypatch, capsys):
    answers = iter(['2', '2'])
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return next(answers)

    monkeypatch.setattr('builtins.input', fake_input)
    assert main(['--methods', 'rectangle']) == 0
    assert prompts == ['Enter integration start point: ', 'Enter integration end point: ']
    output = capsys.readouterr().out
    assert 'Monte Carlo:' not in output
    assert _result(output, 1, 'Rectangle rule:') == 0.0


@pytest.mark.parametrize('argv, answers, message', [
    ([], ['abc'], 'Error: Invalid input for start point'),
    (['--start', '0'], ['x1'], 'Error: Invalid input for end point'),
    (['--start', '0'], [], 'Error: Invalid input for end point'),
])
def test_main_invalid_input(monkeypatch, capsys, argv, answers, message):
    answers = iter(answers)

    def fake_input(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr('builtins.input', fake_input)
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_main_invalid_scan_points(capsys):
    assert main(['--start', '0', '--end', '1', '--scan_points', '0']) == 1
    assert 'n_scan_points' in capsys.readouterr().err
