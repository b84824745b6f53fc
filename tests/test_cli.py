from chemdesc.presentation.cli.predict_bond_ip import main, setup_parser


def test_parser_defaults():
    args = setup_parser().parse_args(["C=C"])
    assert args.smiles == "C=C"
    assert args.confidence == 0.25
    assert args.min_leaf == 2
    assert not args.all_bonds


def test_predicts_double_bond(capsys):
    assert main(["C=C"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    index, atoms, order, value = lines[0].split("\t")
    assert (index, atoms, order) == ("0", "C0-C1", "DOUBLE")
    assert 5.0 < float(value) < 15.0


def test_all_bonds_lists_not_computed(capsys):
    assert main(["CC=C", "--all-bonds"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    assert lines[0].split("\t")[2:] == ["SINGLE", "-1.00"]
    assert lines[1].split("\t")[2] == "DOUBLE"


def test_invalid_smiles_fails(capsys):
    assert main(["C("]) == 1
    assert capsys.readouterr().out == ""


def test_invalid_confidence_fails():
    assert main(["C=C", "--confidence", "0.9"]) == 1
