from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image, ImageStat

from squeeze.core.exceptions import DecodeError, EncodeError
from squeeze.core.jpeg import decode_image, encode_jpeg, register_codecs
from tests.helpers import gray_ramp, image_bytes, ramp_samples

DECODERS = ("JPEG", "PNG")


def test_register_codecs_normalizes_names() -> None:
    assert register_codecs(["jpeg", "png"]) == ("JPEG", "PNG")


def test_register_codecs_rejects_unknown_decoder() -> None:
    with pytest.raises(RuntimeError, match="NOPE"):
        register_codecs(["JPEG", "NOPE"])


@pytest.mark.parametrize(("fmt", "name"), [("PNG", "png"), ("JPEG", "jpeg")])
def test_decode_reports_lowercase_format(fmt: str, name: str) -> None:
    image, source_format = decode_image(image_bytes(fmt), DECODERS)

    assert source_format == name
    assert image.size == (64, 48)


def test_decode_only_uses_registered_decoders() -> None:
    png = image_bytes("PNG")

    with pytest.raises(DecodeError, match="Unsupported image format"):
        decode_image(png, ("JPEG",))


def test_decode_rejects_truncated_image() -> None:
    png = image_bytes("PNG", size=(200, 200))

    with pytest.raises(DecodeError):
        decode_image(png[: len(png) // 2], DECODERS)


@pytest.mark.parametrize("mode", ["RGB", "L", "RGBA", "P", "LA"])
def test_encode_writes_jpeg_for_any_mode(mode: str) -> None:
    image = Image.open(BytesIO(image_bytes("PNG", mode=mode)))
    output = BytesIO()

    encode_jpeg(image, output, quality=90)

    output.seek(0)
    with Image.open(output) as written:
        assert written.format == "JPEG"
        assert written.size == image.size
        source_mean = ImageStat.Stat(image.convert("L")).mean[0]
        written_mean = ImageStat.Stat(written.convert("L")).mean[0]
        assert written_mean == pytest.approx(source_mean, abs=4)


@pytest.mark.parametrize("mode", ["I;16", "I"])
def test_encode_keeps_high_byte_of_16_bit_samples(mode: str) -> None:
    image = gray_ramp(mode)
    output = BytesIO()

    encode_jpeg(image, output, quality=95)

    output.seek(0)
    with Image.open(output) as written:
        assert written.format == "JPEG"
        assert written.size == image.size
        samples = ramp_samples(written)

    expected = list(range(0, 256, 32))
    assert all(abs(got - want) <= 4 for got, want in zip(samples, expected)), samples


def test_encode_quality_changes_output_size() -> None:
    image = Image.open(BytesIO(image_bytes("PNG", size=(128, 128))))
    low, high = BytesIO(), BytesIO()

    encode_jpeg(image, low, quality=10)
    encode_jpeg(image, high, quality=95)

    assert len(low.getvalue()) < len(high.getvalue())


def test_encode_failure_raises_encode_error() -> None:
    image = Image.open(BytesIO(image_bytes("PNG")))
    output = BytesIO()
    output.close()

    with pytest.raises(EncodeError, match="Compression failed"):
        encode_jpeg(image, output, quality=70)
