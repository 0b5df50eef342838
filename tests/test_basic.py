"""Basic tests for geomkit image generation and the CLI."""

import numpy as np
import pytest


def test_generate_basic():
    from geomkit import generate
    img = generate(32, 16, seed=42)
    assert img.mode == "RGB"
    assert img.size == (32, 16)


def test_generate_origin_pixel():
    from geomkit import generate
    img = generate(8, 8, seed=42)
    # sample(0, 0, 0) == 0.23657... for seed 42
    assert img.getpixel((0, 0)) == (60, 60, 60)


def test_generate_clamps_size():
    from geomkit import generate
    img = generate(0, -5, seed=1)
    assert img.size == (1, 1)


def test_reproducibility():
    from geomkit import generate
    arr1 = np.array(generate(40, 24, seed=99))
    arr2 = np.array(generate(40, 24, seed=99))
    np.testing.assert_array_equal(arr1, arr2)


def test_different_seeds_differ():
    from geomkit import generate
    arr1 = np.array(generate(40, 24, seed=1))
    arr2 = np.array(generate(40, 24, seed=2))
    assert not np.array_equal(arr1, arr2)


def test_color_ramp():
    from geomkit import generate
    img = generate(10, 10, seed=5, low_color=(255, 0, 0), high_color=(255, 0, 0))
    arr = np.array(img)
    assert (arr == [255, 0, 0]).all()


def test_render_uses_existing_engine():
    from geomkit import Noise, render
    noise = Noise(random=lambda: 0.5)
    img = render(6, 4, noise=noise)
    # 0.5 * 0.9375 * 255 rounds to 120
    assert (np.array(img) == 120).all()


def test_render_applies_detail_config():
    from geomkit import Noise, RenderConfig, render
    noise = Noise()
    render(4, 4, seed=3, config=RenderConfig(octaves=2, falloff=0.8), noise=noise)
    assert noise.octaves == 2
    assert noise.falloff == 0.8
    assert noise.seed == 3


def test_sample_field_matches_engine():
    from geomkit import Noise, RenderConfig
    from geomkit.renderer import sample_field
    noise = Noise()
    noise.reseed(8)
    config = RenderConfig(scale=0.1, offset=(5.0, 2.0), z=1.5)
    field = sample_field(noise, 7, 3, config)
    assert field.shape == (3, 7)
    assert field[2, 6] == pytest.approx(noise.sample(1.1, 0.4, 1.5))


def test_cli_writes_image(tmp_path, capsys):
    from PIL import Image
    from geomkit.__main__ import main
    out = tmp_path / "sub" / "field.png"
    main(["24", "12", "--seed", "7", "--octaves", "3", "--output", str(out)])
    assert out.exists()
    with Image.open(out) as img:
        assert img.size == (24, 12)
    assert "Saved noise (24x12)" in capsys.readouterr().out


def test_cli_rejects_bad_arguments():
    from geomkit.__main__ import main
    with pytest.raises(SystemExit) as exc:
        main(["wide", "12"])
    assert exc.value.code == 2
