# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

import tempfile
import unittest
from dataclasses import replace
from pathlib import Path
from unittest import mock

from certgen.core.errors import (
    CertificateError,
    PDFWriteError,
    TemplateImageError,
    TemplateNotFoundError,
)
from certgen.core.models import CertificateRequest, RenderConfig, TextFieldConfig
from certgen.qr.codec import render_qr_image
from certgen.render.pdf_render import (
    draw_qr,
    draw_template,
    draw_texts,
    new_page,
    write_pdf,
)
from certgen.render.text import draw_text_field, embedded_family, register_fonts
from tests.test_support import UNICODE_TTF, write_template_png


class TestNewPage(unittest.TestCase):
    def test_page_matches_requested_size(self) -> None:
        pdf = new_page(211.6667, 163.576)
        self.assertAlmostEqual(pdf.w, 211.6667, places=3)
        self.assertAlmostEqual(pdf.h, 163.576, places=3)
        self.assertEqual(pdf.page_no(), 1)
        self.assertEqual(pdf.l_margin, 0)
        self.assertEqual(pdf.t_margin, 0)
        self.assertEqual(pdf.r_margin, 0)
        self.assertFalse(pdf.auto_page_break)


class TestDrawTemplate(unittest.TestCase):
    def test_no_template_configured_is_noop(self) -> None:
        pdf = mock.Mock()
        draw_template(pdf, RenderConfig(), 200.0, 100.0)
        pdf.image.assert_not_called()

    def test_missing_template_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "missing.png"
            config = RenderConfig(template_path=missing)
            with self.assertRaises(TemplateNotFoundError) as ctx:
                draw_template(new_page(200.0, 100.0), config, 200.0, 100.0)
        self.assertEqual(ctx.exception.path, missing)
        self.assertIn("template image not found", str(ctx.exception))

    def test_template_stretched_inside_safety_margin(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            template = write_template_png(Path(tmpdir) / "template.png")
            pdf = mock.Mock()
            config = RenderConfig(template_path=template, template_safety_mm=1.5)
            draw_template(pdf, config, 200.0, 100.0)
        pdf.image.assert_called_once_with(str(template), x=1.5, y=1.5, w=197.0, h=97.0)

    def test_unreadable_template_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            template = Path(tmpdir) / "template.png"
            template.write_bytes(b"not an image")
            config = RenderConfig(template_path=template)
            with self.assertRaises(TemplateImageError):
                draw_template(new_page(200.0, 100.0), config, 200.0, 100.0)


class TestDrawText(unittest.TestCase):
    def test_left_anchored_text_starts_at_anchor(self) -> None:
        pdf = new_page(200.0, 100.0)
        field = TextFieldConfig(size=18.0, left=50.0, top=30.0)
        x = draw_text_field(pdf, "Jane Doe", field, font_family="Helvetica")
        self.assertEqual(x, 50.0)

    def test_centered_text_is_shifted_by_half_width(self) -> None:
        pdf = new_page(200.0, 100.0)
        field = TextFieldConfig(size=18.0, left=100.0, top=30.0, align="center", style="B")
        pdf.set_font("Helvetica", style="B", size=18.0)
        width = pdf.get_string_width("Jane Doe")
        x = draw_text_field(pdf, "Jane Doe", field, font_family="Helvetica")
        self.assertAlmostEqual(x, 100.0 - width / 2)

    def test_registration_line_is_labelled(self) -> None:
        pdf = mock.Mock()
        pdf.get_string_width.return_value = 10.0
        pdf.c_margin = 1.0
        request = CertificateRequest("Jane Doe", "REG-001", Path("."))
        draw_texts(pdf, request, RenderConfig())
        texts = [call.args[2] for call in pdf.cell.call_args_list]
        self.assertEqual(texts, ["Jane Doe", "Registration Number : REG-001"])
        fonts = [call.kwargs for call in pdf.set_font.call_args_list]
        self.assertEqual(fonts[0], {"style": "B", "size": 42.0})
        self.assertEqual(fonts[1], {"style": "", "size": 18.0})

    def test_unknown_font_is_certificate_error(self) -> None:
        pdf = new_page(200.0, 100.0)
        request = CertificateRequest("Jane Doe", "REG-001", Path("."))
        with self.assertRaises(CertificateError):
            draw_texts(pdf, request, RenderConfig(font_family="NoSuchFont"))

    def test_non_latin_name_with_core_font_is_certificate_error(self) -> None:
        pdf = new_page(200.0, 100.0)
        request = CertificateRequest("李小龍", "REG-001", Path("."))
        with self.assertRaises(CertificateError):
            draw_texts(pdf, request, RenderConfig())


class TestFontRegistration(unittest.TestCase):
    def test_embedded_family(self) -> None:
        font = Path("/fonts/DejaVuSans.ttf")
        cases = (
            (RenderConfig(), "Helvetica"),
            (RenderConfig(font_family="Times"), "Times"),
            (RenderConfig(font_file=font), "DejaVuSans"),
            (RenderConfig(font_family="arial", font_file=font), "DejaVuSans"),
            (RenderConfig(font_family="Lato", font_file=font), "Lato"),
            (RenderConfig(font_file=Path("/fonts/Helvetica.ttf")), "Helvetica-TTF"),
        )
        for config, expected in cases:
            with self.subTest(family=config.font_family, font_file=config.font_file):
                self.assertEqual(embedded_family(config), expected)

    def test_font_file_under_core_family_registered_by_stem(self) -> None:
        pdf = mock.Mock()
        config = RenderConfig(
            font_file=Path("/fonts/DejaVuSans.ttf"),
            font_bold_file=Path("/fonts/DejaVuSans-Bold.ttf"),
        )
        self.assertEqual(register_fonts(pdf, config), "DejaVuSans")
        self.assertEqual(
            pdf.add_font.call_args_list,
            [
                mock.call("DejaVuSans", style="", fname=str(Path("/fonts/DejaVuSans.ttf"))),
                mock.call("DejaVuSans", style="B", fname=str(Path("/fonts/DejaVuSans-Bold.ttf"))),
            ],
        )

    def test_texts_drawn_with_embedded_family(self) -> None:
        pdf = mock.Mock()
        pdf.get_string_width.return_value = 10.0
        pdf.c_margin = 1.0
        request = CertificateRequest("Jane Doe", "REG-001", Path("."))
        draw_texts(pdf, request, RenderConfig(font_file=Path("/fonts/DejaVuSans.ttf")))
        families = [call.args[0] for call in pdf.set_font.call_args_list]
        self.assertEqual(families, ["DejaVuSans", "DejaVuSans"])

    def test_no_font_file_registers_nothing(self) -> None:
        pdf = mock.Mock()
        self.assertEqual(register_fonts(pdf, RenderConfig()), "Helvetica")
        pdf.add_font.assert_not_called()

    @unittest.skipUnless(UNICODE_TTF is not None, "no TrueType font with Latin Extended glyphs found")
    def test_non_latin_name_with_font_file_and_default_family(self) -> None:
        pdf = new_page(200.0, 100.0)
        request = CertificateRequest("Łukasz Żółć", "REG-9", Path("."))
        draw_texts(pdf, request, RenderConfig(font_file=UNICODE_TTF))
        self.assertTrue(bytes(pdf.output()).startswith(b"%PDF"))


class TestDrawQr(unittest.TestCase):
    def test_image_drawn_at_converted_size(self) -> None:
        config = RenderConfig()
        image = render_qr_image("https://example.org#1", config.qr)
        pdf = mock.Mock()
        self.assertTrue(draw_qr(pdf, image, config))
        kwargs = pdf.image.call_args.kwargs
        self.assertEqual((kwargs["x"], kwargs["y"]), (160.0, 110.0))
        self.assertAlmostEqual(kwargs["w"], 15.24)
        self.assertAlmostEqual(kwargs["h"], 15.24)

    def test_missing_qr_file_is_skipped_with_warning(self) -> None:
        warnings: list[str] = []
        pdf = mock.Mock()
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = Path(tmpdir) / "temp_qr_REG.png"
            drawn = draw_qr(pdf, missing, RenderConfig(), warn=warnings.append)
        self.assertFalse(drawn)
        pdf.image.assert_not_called()
        self.assertEqual(len(warnings), 1)
        self.assertIn("skipping QR overlay", warnings[0])


class TestWritePdf(unittest.TestCase):
    def test_writes_pdf_bytes(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.pdf"
            write_pdf(new_page(100.0, 50.0), output)
            self.assertTrue(output.read_bytes().startswith(b"%PDF"))

    def test_write_failure_raises_and_leaves_nothing(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "missing" / "out.pdf"
            with self.assertRaises(PDFWriteError) as ctx:
                write_pdf(new_page(100.0, 50.0), output)
            self.assertFalse(output.exists())
        self.assertEqual(ctx.exception.path, output)
        self.assertIsInstance(ctx.exception.__cause__, OSError)

    def test_partial_file_removed_on_write_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.pdf"
            output.write_bytes(b"stale")
            with mock.patch.object(Path, "write_bytes", side_effect=OSError("disk full")):
                with self.assertRaises(PDFWriteError):
                    write_pdf(new_page(100.0, 50.0), output)
            self.assertFalse(output.exists())


if __name__ == "__main__":
    unittest.main()
