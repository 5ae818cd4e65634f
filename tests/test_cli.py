"""Tests for the sburger command-line interface."""

import json

import pytest
from click.testing import CliRunner

from sburger.cli import main
from sburger.messages import decrypt_message, derive_key, new_cipher


TEST_KEY_HEX = b"TESTKEY_TESTKEY_TESTKEY_TESTKEY_".hex()


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestSettingsCommand:
    """Tests for 'sburger settings'."""

    def test_shows_parameters(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["settings", "--key", TEST_KEY_HEX])
        assert result.exit_code == 0
        assert "b = [3, 6, 10, 2]" in result.output
        assert "f = [6, 6, 6, 6]" in result.output
        assert "xor_b2 -> invert_b0 -> rotl_6 -> xor_key -> rotr_6 -> xor_b3" in result.output

    def test_requires_one_key_source(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["settings"])
        assert result.exit_code == 1
        assert "exactly one of --key or --passphrase" in result.output

    def test_short_key_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["settings", "--key", "abcd"])
        assert result.exit_code == 1
        assert "64 hex chars" in result.output

    def test_zero_key_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["settings", "--key", "00" * 32])
        assert result.exit_code == 1
        assert "Key has not been set" in result.output


class TestBlockCommand:
    """Tests for 'sburger block'."""

    def test_encrypt_known_block(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["block", "--key", bytes(range(32)).hex(), "--data", b"abcd".hex()]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "ce40c345"

    def test_decrypt_known_block(self, runner: CliRunner) -> None:
        result = runner.invoke(
            main, ["block", "--key", bytes(range(32)).hex(), "--data", "ce40c345", "--decrypt"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == b"abcd".hex()

    def test_oversized_block_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["block", "--key", TEST_KEY_HEX, "--data", "00" * 33])
        assert result.exit_code == 1
        assert "between 1 and 32 bytes" in result.output

    def test_verbose_and_trace(self, runner: CliRunner, tmp_path) -> None:
        trace_path = tmp_path / "trace.jsonl"
        result = runner.invoke(
            main,
            ["block", "--key", TEST_KEY_HEX, "--data", b"Hell".hex(),
             "--verbose", "--trace", str(trace_path)],
        )
        assert result.exit_code == 0
        assert "RESULT" in result.output
        assert "Ciphertext: ee87d6ca" in result.output
        assert "[OK] PASS" in result.output

        with open(trace_path) as f:
            records = [json.loads(line) for line in f]
        assert len(records) == 4 * 6
        assert records[-1]["value"] == 0xCA


class TestMessageCommands:
    """Tests for 'sburger encrypt' and 'sburger decrypt'."""

    def test_encrypt_then_decrypt(self, runner: CliRunner) -> None:
        enc = runner.invoke(main, ["encrypt", "--passphrase", "pw", "--text", "hello world"])
        assert enc.exit_code == 0
        ciphertext_hex = enc.output.strip()
        assert len(ciphertext_hex) == 64

        cipher = new_cipher(derive_key("pw"))
        assert decrypt_message(cipher, bytes.fromhex(ciphertext_hex)) == b"hello world"

        dec = runner.invoke(main, ["decrypt", "--passphrase", "pw", ciphertext_hex])
        assert dec.exit_code == 0
        assert dec.output.strip() == "hello world"

    def test_decrypt_hex_out(self, runner: CliRunner) -> None:
        enc = runner.invoke(main, ["encrypt", "--key", TEST_KEY_HEX, "--hex", "00ff"])
        dec = runner.invoke(
            main, ["decrypt", "--key", TEST_KEY_HEX, "--hex-out", enc.output.strip()]
        )
        assert dec.exit_code == 0
        assert dec.output.strip() == "00ff"

    def test_encrypt_needs_one_input(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["encrypt", "--key", TEST_KEY_HEX])
        assert result.exit_code == 1
        assert "exactly one of --text or --hex" in result.output

    def test_decrypt_bad_length(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["decrypt", "--key", TEST_KEY_HEX, "00" * 31])
        assert result.exit_code == 1
        assert "multiple of 32" in result.output


class TestDemoAndValidate:
    """Tests for 'sburger demo' and 'sburger validate'."""

    def test_demo(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo"])
        assert result.exit_code == 0
        assert "Decrypted  : Hello, sBurger-256!" in result.output
        assert "Match      : True" in result.output
        assert "Match      : False" in result.output

    def test_demo_empty_passphrase_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["demo", "--passphrase", ""])
        assert result.exit_code == 1
        assert "passphrase must not be empty" in result.output

    def test_validate_seeded(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["validate", "--n", "25", "--seed", "7", "-v"])
        assert result.exit_code == 0
        assert "Known-answer tests: 3/3 passed" in result.output
        assert "Random tests: 25/25 passed" in result.output
        assert "VALIDATION PASSED" in result.output

    def test_validate_negative_count_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["validate", "--n", "-1"])
        assert result.exit_code == 2
        assert "VALIDATION" not in result.output

    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output
