from app.extractors.text import clean_text


def test_removes_scripts_and_styles_with_content():
    html = (
        "<p>Hola</p>"
        "<script>var phone = '600112233';</script>"
        "<style>p { color: red; }</style>"
        "<p>mundo</p>"
    )
    assert clean_text(html) == "Hola mundo"


def test_script_removal_is_case_insensitive_and_multiline():
    html = "<SCRIPT type='text/javascript'>\nalert(1);\n</SCRIPT>ok"
    assert clean_text(html) == "ok"


def test_decodes_common_entities():
    assert clean_text("<p>A&nbsp;&amp;&nbsp;B &lt;3&gt;</p>") == "A & B <3>"


def test_collapses_whitespace_and_trims():
    assert clean_text("<div>\n   Clínica\t\tDental  </div>\n") == "Clínica Dental"


def test_tags_become_word_separators():
    assert clean_text("<li>Pediatría</li><li>Cardiología</li>") == "Pediatría Cardiología"


def test_idempotent_on_normalized_text():
    normalized = clean_text(
        "<html><body><h1>Centro Médico</h1>\n<p>Calle Mayor 12 &amp; Co.</p></body></html>"
    )
    assert clean_text(normalized) == normalized


def test_empty_document():
    assert clean_text("") == ""
