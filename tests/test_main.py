"""
Tests untuk command line parsing
"""

import pytest

from rkena_mma.main import parse_args


def test_defaults(monkeypatch):
    monkeypatch.delenv('RKENA_SEED', raising=False)

    options = parse_args([])

    assert not options.mute
    assert options.seed is None
    assert not options.debug_hitboxes
    assert not options.debug


def test_flags(monkeypatch):
    monkeypatch.delenv('RKENA_SEED', raising=False)

    options = parse_args(['--mute', '--debug-hitboxes', '--debug', '--seed', '12'])

    assert options.mute
    assert options.debug_hitboxes
    assert options.debug
    assert options.seed == 12


def test_seed_from_environment_is_overridden_by_flag(monkeypatch):
    monkeypatch.setenv('RKENA_SEED', '7')

    assert parse_args([]).seed == 7
    assert parse_args(['--seed=9']).seed == 9


def test_blank_environment_seed_is_unset(monkeypatch):
    monkeypatch.setenv('RKENA_SEED', '  ')

    assert parse_args([]).seed is None


def test_unknown_option_exits(monkeypatch, capsys):
    monkeypatch.delenv('RKENA_SEED', raising=False)

    with pytest.raises(SystemExit) as exc:
        parse_args(['--fast'])

    assert exc.value.code == 2
    assert '--fast' in capsys.readouterr().err


def test_seed_must_be_an_integer(monkeypatch):
    monkeypatch.delenv('RKENA_SEED', raising=False)

    with pytest.raises(SystemExit):
        parse_args(['--seed', 'abc'])
