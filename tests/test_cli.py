from typer.testing import CliRunner

from enigma_engine.cli import app

runner = CliRunner()


def test_encrypt() -> None:
    result = runner.invoke(app, ["encrypt", "--text", "HELLOWORLD"])
    assert result.exit_code == 0
    assert "ILBDAAMTAZ" in result.output


def test_decrypt() -> None:
    result = runner.invoke(
        app,
        ["decrypt", "--text", "ILBDAAMTAZ", "--rotors", "I II III", "--positions", "AAA"],
    )
    assert result.exit_code == 0
    assert "HELLOWORLD" in result.output


def test_pass_through_and_strip() -> None:
    kept = runner.invoke(app, ["encrypt", "--text", "HELLO WORLD"])
    assert "ILBDA AMTAZ" in kept.output

    stripped = runner.invoke(app, ["encrypt", "--text", "hello, world", "--strip"])
    assert "ILBDAAMTAZ" in stripped.output


def test_plugs_option_and_env() -> None:
    result = runner.invoke(app, ["encrypt", "--text", "A", "--plug", "AZ"])
    assert result.exit_code == 0
    assert "U" in result.output

    env = runner.invoke(app, ["encrypt", "--text", "Z"], env={"ENIGMA_PLUGS": "AZ"})
    assert env.exit_code == 0
    assert "B" in env.output


def test_bad_rotor_exits_1() -> None:
    result = runner.invoke(app, ["encrypt", "--text", "A", "--rotors", "I II IX"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_verbose_logs_stepping() -> None:
    result = runner.invoke(app, ["--verbose", "encrypt", "--text", "A"])
    assert result.exit_code == 0
    assert "positions AAB" in result.output


def test_catalog() -> None:
    result = runner.invoke(app, ["catalog"])
    assert result.exit_code == 0
    assert "EKMFLGDQVZNTOWYHXUSPAIBRCJ" in result.output
    assert "YRUHQSLDPXNGOKMIEBFZCWVJAT" in result.output


def test_default_positions_fit_any_rotor_count() -> None:
    four = runner.invoke(app, ["encrypt", "--text", "A", "--rotors", "I II III IV"])
    assert four.exit_code == 0

    one = runner.invoke(app, ["encrypt", "--text", "A", "--rotors", "I"])
    assert one.exit_code == 0
