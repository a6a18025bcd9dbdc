from app.extractors.page import ParsedPage
from app.extractors.schedule import extract_schedule


def _schedule(html: str) -> str:
    return extract_schedule(ParsedPage(html))


def test_horario_label():
    html = "<p>Horario de atención: lunes a viernes de 9:00 a 20:00 y sábados de 10:00 a 14:00</p>"
    assert _schedule(html) == "lunes a viernes de 9:00 a 20:00 y sábados de 10:00 a 14:00"


def test_horarios_label_without_atencion():
    html = "<h4>Horarios</h4><p>Mañanas de 8:30 a 14:00, tardes de 16:00 a 20:00</p>"
    assert _schedule(html) == "Mañanas de 8:30 a 14:00, tardes de 16:00 a 20:00"


def test_day_range():
    html = "<p>Atendemos lunes, martes, miércoles, jueves y viernes con cita previa.</p>"
    assert _schedule(html) == "lunes, martes, miércoles, jueves y viernes"


def test_english_day_range():
    html = "<p>Open Monday through Friday, closed on Sunday</p>"
    assert _schedule(html) == "Monday through Friday, closed on Sunday"


def test_time_range():
    html = "<p>Abierto desde las 09:30 de la mañana hasta las 18:00 todos los días</p>"
    assert _schedule(html) == "09:30 de la mañana hasta las 18:00"


def test_short_label_text_is_ignored():
    assert _schedule("<p>Horario: consultar</p>") == ""


def test_no_schedule():
    assert _schedule("<p>Bienvenidos a la clínica</p>") == ""


def test_label_capture_filling_300_chars_falls_through_to_day_range():
    filler = "Consulte disponibilidad llamando a recepcion " * 12
    html = (
        f"<p>Horario: {filler}</p>"
        "<p>Abrimos lunes, martes, miércoles, jueves y viernes con cita previa</p>"
    )
    assert _schedule(html) == "lunes, martes, miércoles, jueves y viernes"
