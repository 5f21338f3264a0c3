# file: tests/test_config_cli.py

"""
Tests for configuration loading, metrics helpers and the command-line interface.
"""

import json
import logging

import pytest

from hamming_codec import (
    encode,
    decode,
    load_config,
    get_default_config,
    code_metrics,
    minimum_distance,
    hamming_distance,
    compute_ber,
    compute_redundancy_overhead,
    code_rate,
    CodeMetrics,
    InvalidInputError,
    HammingConfigurationError,
)
from hamming_codec.cli import main
from hamming_codec.config import resolve_codec_options


class TestConfig:
    """Test YAML configuration handling."""

    def test_default_config(self):
        config = load_config()

        assert config['hamming']['position_rule'] == 'reference'
        assert config['hamming']['language'] == 'en'
        assert config['logging']['level'] == 'WARNING'

    def test_load_config_merges_over_defaults(self, tmp_path):
        path = tmp_path / "codec.yaml"
        path.write_text("hamming:\n  position_rule: textbook\n")

        config = load_config(str(path))

        assert config['hamming']['position_rule'] == 'textbook'
        assert config['hamming']['language'] == 'en'
        assert 'logging' in config

    def test_load_empty_config_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_config(str(path)) == get_default_config()

    def test_load_missing_config_file(self, tmp_path):
        with pytest.raises(HammingConfigurationError, match="Cannot load"):
            load_config(str(tmp_path / "missing.yaml"))

    def test_load_non_mapping_config(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- reference\n- textbook\n")

        with pytest.raises(HammingConfigurationError, match="must contain a mapping"):
            load_config(str(path))

    @pytest.mark.parametrize("section", ["hamming", "logging"])
    def test_empty_section_falls_back_to_defaults(self, tmp_path, section):
        path = tmp_path / "codec.yaml"
        path.write_text(f"{section}:\n")

        assert load_config(str(path)) == get_default_config()

    @pytest.mark.parametrize("section", ["hamming", "logging"])
    def test_scalar_section_rejected(self, tmp_path, section):
        path = tmp_path / "codec.yaml"
        path.write_text(f"{section}: textbook\n")

        with pytest.raises(HammingConfigurationError, match=f"'{section}' .* must be a mapping"):
            load_config(str(path))

    def test_resolve_defaults(self):
        assert resolve_codec_options(None) == ('reference', 'en')
        assert resolve_codec_options({}) == ('reference', 'en')
        assert resolve_codec_options({'hamming': None}) == ('reference', 'en')

    def test_resolve_custom(self):
        config = {'hamming': {'position_rule': 'textbook', 'language': 'es'}}
        assert resolve_codec_options(config) == ('textbook', 'es')

    def test_unknown_position_rule(self):
        with pytest.raises(HammingConfigurationError, match="Unknown position rule"):
            encode("1011", {'hamming': {'position_rule': 'bogus'}})

    def test_unknown_language(self):
        with pytest.raises(HammingConfigurationError, match="Unknown step log language"):
            decode("1011", {'hamming': {'language': 'fr'}})

    def test_config_not_a_dict(self):
        with pytest.raises(HammingConfigurationError, match="must be a dict"):
            encode("1011", "textbook")

    def test_loaded_config_drives_codec(self, tmp_path):
        path = tmp_path / "codec.yaml"
        path.write_text("hamming:\n  position_rule: textbook\n  language: es\n")

        result = encode("1011", load_config(str(path)))

        assert result.encoded_data == "0110011"
        assert result.steps[0] == "Datos de entrada: 1011"


class TestMetrics:
    """Test metrics computation functions."""

    def test_code_metrics(self):
        assert code_metrics(4) == CodeMetrics(
            payload_length=4, min_distance=3, detectable_errors=2, correctable_errors=1
        )

    def test_minimum_distance_matches_log2_formula(self):
        for m in (1, 2, 3, 4, 5, 7, 8, 9, 15, 16, 17, 1000):
            assert minimum_distance(m) == len(bin(m)) - 2

    def test_minimum_distance_empty_payload(self):
        with pytest.raises(InvalidInputError):
            minimum_distance(0)

    def test_hamming_distance(self):
        assert hamming_distance("1011", "1011") == 0
        assert hamming_distance("1011", "0010") == 2
        assert hamming_distance("1011", "101") is None

    def test_compute_ber(self):
        assert compute_ber("0000", "0000") == 0.0
        assert compute_ber("0000", "0100") == 0.25
        assert compute_ber("0000", "1111") == 1.0

    def test_compute_ber_length_mismatch(self):
        with pytest.raises(ValueError, match="Length mismatch"):
            compute_ber("0000", "000")

    def test_compute_redundancy_overhead(self):
        assert compute_redundancy_overhead(4, 7) == 75.0

    def test_compute_redundancy_overhead_invalid(self):
        with pytest.raises(ValueError):
            compute_redundancy_overhead(0, 7)

        with pytest.raises(ValueError):
            compute_redundancy_overhead(7, 4)

    def test_code_rate(self):
        assert abs(code_rate(4, 7) - 4 / 7) < 1e-9
        assert code_rate(11, 15) == 11 / 15


class TestCLI:
    """Test the hamming-codec command."""

    def test_encode(self, capsys):
        assert main(['encode', '1011']) == 0

        output = json.loads(capsys.readouterr().out)
        assert output['encodedData'] == '1111011'
        assert output['hammingDistance'] == 3

    def test_decode_corrected(self, capsys):
        assert main(['--rule', 'textbook', 'decode', '0110111']) == 0

        output = json.loads(capsys.readouterr().out)
        assert output['decodedData'] == '1011'
        assert output['error'] is False
        assert output['errorDetails']['position'] == 5

    def test_decode_uncorrectable(self, capsys):
        assert main(['decode', '0101']) == 1

        output = json.loads(capsys.readouterr().out)
        assert output['error'] is True
        assert output['decodedData'] is None

    def test_spanish_output(self, capsys):
        assert main(['--language', 'es', 'encode', '1011']) == 0

        output = json.loads(capsys.readouterr().out)
        assert output['steps'][0] == 'Datos de entrada: 1011'

    def test_invalid_input(self, capsys):
        assert main(['encode', '10a1']) == 2
        assert 'Invalid character' in capsys.readouterr().err

    def test_bad_config_path(self, tmp_path, capsys):
        assert main(['--config', str(tmp_path / 'nope.yaml'), 'encode', '1']) == 2
        assert 'Cannot load' in capsys.readouterr().err

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "codec.yaml"
        path.write_text("hamming:\n  position_rule: textbook\n")

        assert main(['--config', str(path), 'encode', '1011']) == 0
        assert json.loads(capsys.readouterr().out)['encodedData'] == '0110011'

    def test_config_file_with_empty_sections(self, tmp_path, capsys):
        path = tmp_path / "codec.yaml"
        path.write_text("hamming:\nlogging:\n")

        assert main(['--config', str(path), '--rule', 'textbook', 'encode', '1011']) == 0
        assert json.loads(capsys.readouterr().out)['encodedData'] == '0110011'

    @pytest.mark.parametrize("section", ["hamming", "logging"])
    def test_config_file_with_scalar_section(self, tmp_path, capsys, section):
        path = tmp_path / "codec.yaml"
        path.write_text(f"{section}: textbook\n")

        assert main(['--config', str(path), 'encode', '1011']) == 2
        assert 'must be a mapping' in capsys.readouterr().err


class TestLogging:
    """Test log records emitted by the codec."""

    def test_correction_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger='hamming_codec'):
            decode('0110111', {'hamming': {'position_rule': 'textbook'}})

        assert any('Corrected bit 5' in record.getMessage() for record in caplog.records)

    def test_uncorrectable_logged_as_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger='hamming_codec'):
            decode('0101')

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert any('exceeds codeword length' in r.getMessage() for r in warnings)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
