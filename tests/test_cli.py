from pipechain.cli import main


def test_too_few_arguments_prints_usage(capsys):
    assert main(["in", "cat", "out"]) == 1
    assert "Usage" in capsys.readouterr().out


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "infile" in capsys.readouterr().out


def test_runs_pipeline(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("one\ntwo\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "one\ntwo\n"


def test_missing_input_file(tmp_path, capsys):
    outfile = tmp_path / "out.txt"
    assert main([str(tmp_path / "absent"), "cat", "cat", str(outfile)]) == 1
    assert "Error" in capsys.readouterr().err
    assert not outfile.exists()


def test_unknown_command_still_exits_zero(tmp_path):
    infile = tmp_path / "in.txt"
    infile.write_text("x\n")
    outfile = tmp_path / "out.txt"
    assert main([str(infile), "cat", "nosuchcmd_zz", str(outfile)]) == 0
    assert outfile.read_text() == "Command not found: nosuchcmd_zz\n"