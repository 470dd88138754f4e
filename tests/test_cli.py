import io

from schedsim.cli import main, run


def write_processes(tmp_path, text):
    path = tmp_path / "procs.txt"
    path.write_text(text, encoding="utf-8")
    return path


def test_run_finishes_every_process(tmp_path):
    source = write_processes(tmp_path, "0 1 3\n1 2 7\n4 3 2\n")
    out = io.StringIO()
    scheduler = run(source, tmp_path / "operations.log", 0, out)
    assert scheduler.finished()
    finished = [p for _, p in scheduler.final.occupied()]
    assert sorted(p.id for p in finished) == [1, 2, 3]
    assert all(p.instructions == 0 for p in finished)
    assert all(p.start <= p.end for p in finished)


def test_run_output_layout(tmp_path):
    source = write_processes(tmp_path, "0 1 2\n")
    out = io.StringIO()
    run(source, tmp_path / "operations.log", 0, out)
    text = out.getvalue()
    assert text.startswith(
        "################### Initial #########################\n"
    )
    assert "################### Running #########################\n" in text
    assert text.rstrip().endswith("Start: 0 | End: 1")


def test_run_writes_log(tmp_path):
    source = write_processes(tmp_path, "0 1 2\n")
    log_path = tmp_path / "operations.log"
    run(source, log_path, 0, io.StringIO())
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "Info | Log Initialized"
    assert "Info | Queues Initialized" in lines
    assert lines.count("Info | Executing instruction") == 2


def test_main_success(tmp_path, capsys):
    source = write_processes(tmp_path, "0 1 1\n")
    status = main([str(source), "--log", str(tmp_path / "x.log"), "--delay", "0"])
    assert status == 0
    assert "Final Processes:" in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    status = main(
        [str(tmp_path / "absent.txt"), "--log", str(tmp_path / "x.log"), "--delay", "0"]
    )
    assert status == 1
    assert "schedsim:" in capsys.readouterr().err