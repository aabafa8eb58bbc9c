"""Tests for image I/O, metrics, params and the CLI."""

import base64
import sys

import numpy as np
import pytest

import main
from models.encode_params import EncodeParams
from utils.image_io import load_image, save_image, fit_within
from utils.metrics import compare_placeholder
from utils.test_images import generate_demo_image, generate_radial_alpha

LANDSCAPE_B64 = '3OcRJYB4d3h/iIeHeEh3eIhw+j3A'


def test_fit_within_keeps_aspect():
    image = np.zeros((150, 300, 4), dtype=np.uint8)
    fitted = fit_within(image, 100)
    assert fitted.shape == (50, 100, 4)


def test_fit_within_leaves_small_images():
    image = np.zeros((20, 30, 4), dtype=np.uint8)
    fitted = fit_within(image, 100)
    assert fitted.shape == image.shape
    assert fitted is not image


def test_save_load_round_trip(tmp_path):
    image = generate_radial_alpha(24, 16)
    path = str(tmp_path / "radial.png")
    save_image(image, path)
    assert np.array_equal(load_image(path), image)


def test_load_missing_image(tmp_path):
    with pytest.raises(ValueError):
        load_image(str(tmp_path / "missing.png"))


def test_compare_identical_images():
    image = np.ascontiguousarray(generate_demo_image("gradient")[:32, :32])
    metrics = compare_placeholder(image, image)
    assert metrics['mae_r'] == 0.0
    assert metrics['ssim_rgb'] == pytest.approx(1.0)


def test_encode_params_validation():
    assert EncodeParams().max_size == 100
    with pytest.raises(ValueError):
        EncodeParams(max_size=101)
    with pytest.raises(ValueError):
        EncodeParams(interpolation='cubic')


def test_unknown_demo_image():
    assert generate_demo_image("nope") is None


def test_cli_decode(tmp_path, monkeypatch, capsys):
    out = tmp_path / "placeholder.png"
    monkeypatch.setattr(sys, 'argv', ['main.py', '--decode', LANDSCAPE_B64, '-o', str(out)])
    main.main()
    
    assert out.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'
    assert '32x23' in capsys.readouterr().out


def test_cli_encode_synthetic(tmp_path, monkeypatch, capsys):
    out = tmp_path / "placeholder.png"
    monkeypatch.setattr(sys, 'argv', ['main.py', '--synthetic', 'radial_alpha', '-o', str(out)])
    main.main()
    
    printed = capsys.readouterr().out
    line = next(l for l in printed.splitlines() if l.startswith('Hash:'))
    blob = base64.b64decode(line.split()[1])
    assert (blob[2] & 0x80) != 0
    assert out.exists()
