import pytest

from addressing import cli

AGENT_ALICE = 'cad11d00408b27d3097eea5a46bf2ab6433a7234a33d5e49957b13ec7acc2ca08e1a13'


def test_agent(capsys):
    assert cli.main(['agent', 'alice']) == 0

    assert capsys.readouterr().out.strip() == AGENT_ALICE


def test_agent_with_pycryptodome(capsys):
    assert cli.main(['--hash', 'pycryptodome', 'agent', 'alice']) == 0

    assert capsys.readouterr().out.strip() == AGENT_ALICE


@pytest.mark.parametrize('args,prefix', [
    (['namespace-registry', 'abcdef'], '00ec00'),
    (['contract-registry', 'intkey_multiply'], '00ec01'),
    (['contract', 'intkey_multiply', '1.0'], '00ec02'),
    (['smart-permission', 'org_01', 'test_permission'], '00ec03'),
    (['org', 'org_01'], 'cad11d01'),
    (['setting', 'sawtooth.swa.administrators'], '000000'),
])
def test_entities(capsys, args, prefix):
    assert cli.main(args) == 0

    out = capsys.readouterr().out.strip()
    assert len(out) == 70
    assert out.startswith(prefix)


def test_type(capsys):
    assert cli.main(['type', AGENT_ALICE]) == 0
    assert capsys.readouterr().out.strip() == 'agent'

    assert cli.main(['type', 'ff' * 35]) == 0
    assert capsys.readouterr().out.strip() == 'unknown'


def test_invalid_input(capsys):
    assert cli.main(['namespace-registry', 'abc']) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('error: addressing input is invalid:')


def test_missing_entity():
    with pytest.raises(SystemExit):
        cli.main([])


def test_verbosity_is_passed_to_console_logging(monkeypatch):
    levels = []
    monkeypatch.setattr(cli, 'init_console_logging', lambda verbose_level: levels.append(verbose_level))

    cli.main(['org', 'org_01'])
    cli.main(['-vv', 'org', 'org_01'])

    assert levels == [0, 2]


def test_agent_name_not_valid_utf8(capsys):
    # Linux argv carries undecodable bytes as lone surrogates.
    assert cli.main(['agent', 'ali\udcffce']) == 1

    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.startswith('error: addressing input is invalid:')
