"""Printable documents rendered with Pillow.

Pages are drawn on A4-sized RGB canvases and saved as PDF; ID cards carry a
QR code (student code) where the photo would go.
"""

from __future__ import annotations

import io
from datetime import date
from typing import Optional, Sequence

import qrcode
from PIL import Image, ImageDraw, ImageFont

from ..common.datetime_utils import today_local
from ..core.constants import ACADEMIC_YEAR, SCHOOL_NAME
from ..core.exceptions import ValidationError
from ..people.model import Student, level_label

DPI = 150
PX_PER_MM = DPI / 25.4
A4_SIZE = (round(210 * PX_PER_MM), round(297 * PX_PER_MM))

CARDS_PER_PAGE = 8
CARDS_PER_ROW = 2
CARD_MM = (85.6, 53.98)
CARD_MARGIN_MM = 15
CARD_GAP_MM = 5

HEADER_FILL = (41, 128, 185)
CARD_FILL = (79, 70, 229)
CARD_LABEL = (200, 200, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


def _mm(value: float) -> int:
    return round(value * PX_PER_MM)


def _font(size_pt: int) -> ImageFont.ImageFont:
    return ImageFont.load_default(size=round(size_pt * DPI / 72))


def _blank_page() -> Image.Image:
    return Image.new("RGB", A4_SIZE, WHITE)


def _qr_image(data: str, size_px: int) -> Image.Image:
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=2,
    )
    qr.add_data(data)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    return img.resize((size_px, size_px))


def _to_pdf_bytes(pages: Sequence[Image.Image]) -> bytes:
    buf = io.BytesIO()
    first, *rest = pages
    first.save(buf, format="PDF", resolution=DPI, save_all=True, append_images=rest)
    return buf.getvalue()


def _draw_centered(draw: ImageDraw.ImageDraw, y: int, text: str, font) -> None:
    width = draw.textlength(text, font=font)
    draw.text(((A4_SIZE[0] - width) / 2, y), text, fill=BLACK, font=font)


def _spanish_long_date(d: date) -> str:
    return f"{d.day:02d} de {MONTHS_ES[d.month - 1]} de {d.year}"


def render_enrollment_form(student: Student, *, school_name: str = SCHOOL_NAME) -> Image.Image:
    """Ficha Única de Matrícula: field/value grid plus signature lines."""
    page = _blank_page()
    draw = ImageDraw.Draw(page)
    draw.text((_mm(14), _mm(16)), "Ficha Única de Matrícula - SIAGIE", fill=BLACK, font=_font(18))
    draw.text((_mm(14), _mm(25)), school_name, fill=BLACK, font=_font(11))

    rows = [
        ("Apellidos y Nombres", student.full_name),
        ("DNI", student.document_number),
        ("Código de Estudiante", student.student_code),
        ("Fecha de Nacimiento", student.birth_date.strftime("%Y-%m-%d")),
        ("Género", student.gender),
        ("Grado y Sección", f'{student.grade} "{student.section}"'),
        ("Condición", student.condition.value),
        ("Estado de Matrícula", student.enrollment_status.value),
    ]
    left, split, right = _mm(14), _mm(80), _mm(196)
    row_h = _mm(9)
    top = _mm(40)
    body_font = _font(11)

    draw.rectangle((left, top, right, top + row_h), fill=HEADER_FILL, outline=BLACK)
    draw.text((left + _mm(2), top + _mm(2)), "Campo", fill=WHITE, font=body_font)
    draw.text((split + _mm(2), top + _mm(2)), "Información del Estudiante", fill=WHITE, font=body_font)

    y = top + row_h
    for label, value in rows:
        draw.rectangle((left, y, split, y + row_h), outline=BLACK)
        draw.rectangle((split, y, right, y + row_h), outline=BLACK)
        draw.text((left + _mm(2), y + _mm(2)), label, fill=BLACK, font=body_font)
        draw.text((split + _mm(2), y + _mm(2)), value, fill=BLACK, font=body_font)
        y += row_h

    final_y = y
    draw.text((_mm(14), final_y + _mm(20)), "Firma del Apoderado:", fill=BLACK, font=body_font)
    draw.line((_mm(14), final_y + _mm(30), _mm(80), final_y + _mm(30)), fill=BLACK, width=2)
    draw.text((_mm(130), final_y + _mm(20)), "Firma del Director:", fill=BLACK, font=body_font)
    draw.line((_mm(130), final_y + _mm(30), _mm(196), final_y + _mm(30)), fill=BLACK, width=2)
    return page


def render_certificate(
    student: Student,
    *,
    year: int = ACADEMIC_YEAR,
    school_name: str = SCHOOL_NAME,
    issued_on: Optional[date] = None,
) -> Image.Image:
    """Constancia de Matrícula for the given academic year."""
    issued_on = issued_on or today_local()
    page = _blank_page()
    draw = ImageDraw.Draw(page)

    _draw_centered(draw, _mm(22), f"CONSTANCIA DE MATRÍCULA - {year}", _font(18))
    draw.text((_mm(14), _mm(40)), f"La Dirección de la {school_name} hace constar que:", fill=BLACK, font=_font(12))
    _draw_centered(draw, _mm(60), student.full_name.upper(), _font(14))

    body = (
        f"Identificado(a) con DNI N° {student.document_number}, se encuentra debidamente\n"
        f"matriculado(a) en esta institución educativa para el año lectivo {year}, en el:"
    )
    draw.multiline_text((_mm(14), _mm(72)), body, fill=BLACK, font=_font(12), spacing=8)

    level = level_label(student)
    placement = f'{student.grade.upper()} DE EDUCACIÓN {level.upper()} - SECCIÓN "{student.section.upper()}"'
    _draw_centered(draw, _mm(95), placement, _font(14))

    closing = (
        "Se expide la presente constancia a solicitud del interesado para los fines\n"
        "que estime conveniente."
    )
    draw.multiline_text((_mm(14), _mm(110)), closing, fill=BLACK, font=_font(12), spacing=8)
    draw.text((_mm(130), _mm(140)), f"Lima, {_spanish_long_date(issued_on)}", fill=BLACK, font=_font(12))
    draw.line((_mm(130), _mm(170), _mm(190), _mm(170)), fill=BLACK, width=2)
    draw.text((_mm(145), _mm(173)), "Dirección", fill=BLACK, font=_font(12))
    return page


def _draw_id_card(page: Image.Image, student: Student, x: int, y: int, *, year: int, school_name: str) -> None:
    draw = ImageDraw.Draw(page)
    w, h = _mm(CARD_MM[0]), _mm(CARD_MM[1])
    draw.rounded_rectangle((x, y, x + w, y + h), radius=_mm(3), fill=CARD_FILL)

    draw.text((x + _mm(5), y + _mm(4)), school_name, fill=WHITE, font=_font(8))
    draw.text((x + _mm(5), y + _mm(9)), f"CARNET ESCOLAR {year}", fill=WHITE, font=_font(10))

    photo_box = (x + _mm(5), y + _mm(18), x + _mm(30), y + _mm(48))
    draw.rectangle(photo_box, fill=WHITE)
    qr_size = _mm(24)
    page.paste(_qr_image(student.student_code, qr_size), (photo_box[0] + _mm(0.5), photo_box[1] + _mm(3)))

    draw.text((x + _mm(33), y + _mm(20)), student.full_name.upper(), fill=WHITE, font=_font(7))
    draw.text((x + _mm(33), y + _mm(32)), "DNI:", fill=CARD_LABEL, font=_font(8))
    draw.text((x + _mm(41), y + _mm(32)), student.document_number, fill=WHITE, font=_font(8))
    draw.text((x + _mm(33), y + _mm(38)), "GRADO:", fill=CARD_LABEL, font=_font(8))
    draw.text((x + _mm(45), y + _mm(38)), student.grade, fill=WHITE, font=_font(8))
    draw.text((x + _mm(33), y + _mm(44)), "SECCIÓN:", fill=CARD_LABEL, font=_font(8))
    draw.text((x + _mm(49), y + _mm(44)), student.section, fill=WHITE, font=_font(8))


def render_id_card_pages(
    students: Sequence[Student],
    *,
    year: int = ACADEMIC_YEAR,
    school_name: str = SCHOOL_NAME,
) -> list[Image.Image]:
    """Lay out ID cards 8 per A4 page, 2 per row."""
    if not students:
        raise ValidationError("Seleccione al menos un estudiante para generar carnets")

    pages: list[Image.Image] = []
    for index, student in enumerate(students):
        slot = index % CARDS_PER_PAGE
        if slot == 0:
            pages.append(_blank_page())
        row, col = divmod(slot, CARDS_PER_ROW)
        x = _mm(CARD_MARGIN_MM + col * (CARD_MM[0] + CARD_GAP_MM))
        y = _mm(CARD_MARGIN_MM + row * (CARD_MM[1] + CARD_GAP_MM))
        _draw_id_card(pages[-1], student, x, y, year=year, school_name=school_name)
    return pages


def enrollment_form_pdf(student: Student, *, school_name: str = SCHOOL_NAME) -> bytes:
    return _to_pdf_bytes([render_enrollment_form(student, school_name=school_name)])


def certificate_pdf(student: Student, *, year: int = ACADEMIC_YEAR, school_name: str = SCHOOL_NAME) -> bytes:
    return _to_pdf_bytes([render_certificate(student, year=year, school_name=school_name)])


def id_cards_pdf(students: Sequence[Student], *, year: int = ACADEMIC_YEAR, school_name: str = SCHOOL_NAME) -> bytes:
    return _to_pdf_bytes(render_id_card_pages(students, year=year, school_name=school_name))
