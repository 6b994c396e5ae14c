from main import main


def test_pages_pdf(tmp_path, capsys):
    out = tmp_path / "pages.pdf"
    assert main(['--pages', '2', '--seed', '1', '-o', str(out)]) == 0
    assert out.read_bytes().startswith(b'%PDF')
    output = capsys.readouterr().out
    assert "12 x 5 = 60 per page" in output
    assert "Saved 2 page(s)" in output


def test_pages_svg_numbered(tmp_path):
    out = tmp_path / "sheet.svg"
    assert main(['--pages', '2', '--paper', 'a4', '-f', 'svg', '-o', str(out)]) == 0
    assert (tmp_path / "sheet-01.svg").exists()
    assert (tmp_path / "sheet-02.svg").exists()


def test_strip_svg(tmp_path, capsys):
    out = tmp_path / "strip.svg"
    assert main(['--strip', '6', '--width', '2 3/8"', '-f', 'svg', '-o', str(out)]) == 0
    assert out.read_text(encoding='utf-8').count('<rect') == 6
    assert "1 per row" in capsys.readouterr().out


def test_strip_rows(tmp_path, capsys):
    out = tmp_path / "rows.pdf"
    assert main(['--strip', '9', '--width', '61mm', '--layout', 'rows', '-o', str(out)]) == 0
    assert "3 per row" in capsys.readouterr().out


def test_custom_page_size(tmp_path, capsys):
    out = tmp_path / "custom.pdf"
    assert main(['--width', '4in', '--height', '6in', '--margin', '0', '-o', str(out)]) == 0
    assert "6 x 3 = 18 per page" in capsys.readouterr().out


def test_too_many_pages_reports_error(tmp_path, capsys):
    out = tmp_path / "big.pdf"
    assert main(['--pages', '16', '-o', str(out)]) == 1
    assert "Error: Requested 960 unique dominoes" in capsys.readouterr().err
    assert not out.exists()


def test_allow_repeats(tmp_path):
    out = tmp_path / "big.pdf"
    assert main(['--pages', '16', '--allow-repeats', '-o', str(out)]) == 0
    assert out.exists()


def test_bad_measurement_reports_error(tmp_path, capsys):
    assert main(['--spacing', 'wide', '-o', str(tmp_path / "x.pdf")]) == 1
    assert "Invalid measurement format" in capsys.readouterr().err


def test_infeasible_medium_reports_error(tmp_path, capsys):
    assert main(['--strip', '3', '--width', '0.5in', '-o', str(tmp_path / "x.pdf")]) == 1
    assert "No tile fits across" in capsys.readouterr().err


def test_info(capsys):
    assert main(['--info']) == 0
    output = capsys.readouterr().out
    assert "Valid dominoes:" in output
    assert "Symmetric (180°):   0" in output


def test_empty_strip_svg_writes_a_document(tmp_path, capsys):
    out = tmp_path / "empty.svg"
    assert main(['--strip', '0', '-f', 'svg', '-o', str(out)]) == 0
    document = out.read_text(encoding='utf-8')
    assert document.startswith('<svg')
    assert '<rect' not in document
    assert "Saved SVG to:" in capsys.readouterr().out


def test_empty_strip_pdf_writes_a_document(tmp_path, capsys):
    out = tmp_path / "empty.pdf"
    assert main(['--strip', '0', '-o', str(out)]) == 0
    assert out.read_bytes().startswith(b'%PDF')
    assert "Saved 1 page(s)" in capsys.readouterr().out


def test_strip_rejects_page_height(tmp_path, capsys):
    out = tmp_path / "strip.pdf"
    assert main(['--strip', '4', '--height', '5in', '-o', str(out)]) == 1
    assert "Error: --paper and --height apply to page output only" in capsys.readouterr().err
    assert not out.exists()


def test_strip_rejects_paper_preset(tmp_path, capsys):
    out = tmp_path / "strip.pdf"
    assert main(['--strip', '4', '--paper', 'a4', '-o', str(out)]) == 1
    assert "Error:" in capsys.readouterr().err
    assert not out.exists()


def test_paper_defaults_to_letter(tmp_path, capsys):
    assert main(['-o', str(tmp_path / "default.pdf")]) == 0
    assert "12 x 5 = 60 per page" in capsys.readouterr().out
