from dsakit.bst import ListBST
from dsakit.bst_cli import main, run_commands


def test_insert_duplicate_and_size():
    lines = run_commands("I 5 I 5 I 3 S").splitlines()
    assert lines[0].startswith("Key 5 inserted into BST, BST (Default): ")
    assert lines[1].startswith("Insertion failed! Key 5 already exists in BST")
    assert lines[3] == "Size: 2"


def test_empty_check():
    assert run_commands("E") == "Empty\n"
    assert run_commands("E I 1 E").splitlines()[-1] == "Not empty"


def test_find():
    lines = run_commands("I 4 F 4 F 9").splitlines()
    assert lines[1] == "Key 4 found in BST."
    assert lines[2] == "Key 9 not found in BST."


def test_min_max():
    assert run_commands("M Min") == "Empty\n"
    lines = run_commands("I 4 I 9 I 1 M Min M Max").splitlines()
    assert lines[-2] == "Minimum value: 1"
    assert lines[-1] == "Maximum value: 9"


def test_remove():
    lines = run_commands("D 7").splitlines()
    assert lines == ["Removal failed! Key 7 not found in BST, BST (Default): Empty"]
    lines = run_commands("I 7 D 7").splitlines()
    assert lines[-1] == "Key 7 removed from BST, BST (Default): Empty"


def test_traversals_match_tree():
    tree = ListBST()
    for key in (5, 3, 8, 1):
        tree.insert(key, key)
    lines = run_commands("I 5 I 3 I 8 I 1 T In T Pre T Post").splitlines()
    assert lines[-3] == "BST (In-order): " + tree.render("I")
    assert lines[-2] == "BST (Pre-order): " + tree.render("P")
    assert lines[-1] == "BST (Post-order): " + tree.render("O")
    assert lines[-4].endswith(tree.render("D"))


def test_malformed_number_stops():
    assert run_commands("I 5 F x S").splitlines() == run_commands("I 5").splitlines()


def test_main_usage(capsys):
    assert main([]) == 1
    assert "Usage: filename" in capsys.readouterr().err


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.txt")]) == 2
    assert "Unable to open file" in capsys.readouterr().err


def test_main_runs_file(tmp_path, capsys):
    script = "I 2\nI 1\nS\nT In\n"
    path = tmp_path / "cmds.txt"
    path.write_text(script)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == run_commands(script)