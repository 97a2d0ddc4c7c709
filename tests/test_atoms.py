import io

import numpy as np
import pytest
from rdkit import Chem

from mgtype.chemistry.gnina import GninaType
from mgtype.dataset.atoms import perceive_atoms
from mgtype.dataset.encoding import encode_molecule
from mgtype.typers import FileMappedGninaTyper, GninaIndexTyper, GninaVectorTyper


def _gnina_types(smiles, add_hs=False):
    mol = Chem.MolFromSmiles(smiles)
    if add_hs:
        mol = Chem.AddHs(mol)
    typer = GninaIndexTyper()
    return [typer.get_type(record).type for record in perceive_atoms(mol)]


def _with_conformer(mol):
    conf = Chem.Conformer(mol.GetNumAtoms())
    for i in range(mol.GetNumAtoms()):
        conf.SetAtomPosition(i, (float(i), 0.0, 0.0))
    mol.AddConformer(conf, assignId=True)
    return mol


def test_ethanol_records():
    mol = Chem.AddHs(Chem.MolFromSmiles("CCO"))
    records = perceive_atoms(mol)
    assert len(records) == mol.GetNumAtoms()
    oxygen = records[2]
    assert oxygen.symbol == "O"
    assert oxygen.is_hbond_donor and oxygen.is_hbond_acceptor
    assert oxygen.num_hydrogens == 1
    assert oxygen.partial_charge < 0
    assert not records[0].bonded_to_heteroatom
    assert records[1].bonded_to_heteroatom
    hydroxyl_h = [r for r, a in zip(records, mol.GetAtoms()) if a.GetAtomicNum() == 1 and a.GetNeighbors()[0].GetIdx() == 2]
    assert len(hydroxyl_h) == 1
    assert hydroxyl_h[0].bonded_to_donor


def test_ethanol_types_with_hydrogens():
    types = _gnina_types("CCO", add_hs=True)
    assert types[:3] == [
        GninaType.AliphaticCarbonXSHydrophobe,
        GninaType.AliphaticCarbonXSNonHydrophobe,
        GninaType.OxygenXSDonorAcceptor,
    ]
    assert types[3:].count(GninaType.PolarHydrogen) == 1
    assert types[3:].count(GninaType.Hydrogen) == 5


def test_aromatic_nitrogens():
    pyridine = _gnina_types("c1ccncc1")
    assert pyridine[3] == GninaType.NitrogenXSAcceptor
    assert pyridine[2] == GninaType.AromaticCarbonXSNonHydrophobe
    assert pyridine[0] == GninaType.AromaticCarbonXSHydrophobe

    pyrrole = _gnina_types("c1cc[nH]c1")
    assert pyrrole[3] == GninaType.NitrogenXSDonor


def test_amide_amine_and_acid():
    assert _gnina_types("CC(N)=O")[2] == GninaType.NitrogenXSDonor
    assert _gnina_types("CN(C)C")[1] == GninaType.NitrogenXSAcceptor
    acid = _gnina_types("CC(=O)O")
    assert acid[2] == GninaType.OxygenXSAcceptor
    assert acid[3] == GninaType.OxygenXSDonor


def test_charges_can_be_skipped():
    records = perceive_atoms(Chem.MolFromSmiles("CCO"), compute_charges=False)
    assert records[2].atomic_num == 8
    assert all(r.partial_charge == 0.0 for r in records)


def test_water_is_donor_and_acceptor():
    types = _gnina_types("O", add_hs=True)
    assert types == [GninaType.OxygenXSDonorAcceptor, GninaType.PolarHydrogen, GninaType.PolarHydrogen]


def test_flags_not_truncated_on_large_molecules():
    mol = Chem.MolFromSmiles(".".join(["CO"] * 1500))
    records = perceive_atoms(mol, compute_charges=False)
    oxygens = [r for r in records if r.atomic_num == 8]
    assert len(oxygens) == 1500
    assert all(r.is_hbond_donor and r.is_hbond_acceptor for r in oxygens)


def test_encode_molecule_index_typer():
    mol = _with_conformer(Chem.MolFromSmiles("CCO"))
    out = encode_molecule(mol, GninaIndexTyper())
    np.testing.assert_array_equal(out["types"], [2, 3, 12])
    assert out["types"].dtype == np.int32
    np.testing.assert_allclose(out["radii"], [1.9, 1.9, 1.7], rtol=1e-6)
    np.testing.assert_array_equal(out["atom_indices"], [0, 1, 2])
    assert out["coords"].shape == (3, 3)


def test_encode_molecule_drops_unmapped():
    mol = _with_conformer(Chem.MolFromSmiles("CCO"))
    typer = FileMappedGninaTyper(io.StringIO("OxygenXSDonorAcceptor\n"))
    out = encode_molecule(mol, typer)
    np.testing.assert_array_equal(out["types"], [0])
    np.testing.assert_array_equal(out["atom_indices"], [2])
    np.testing.assert_allclose(out["coords"], [[2.0, 0.0, 0.0]])

    kept = encode_molecule(mol, typer, drop_unmapped=False)
    np.testing.assert_array_equal(kept["types"], [-1, -1, 0])


def test_encode_molecule_vector_typer():
    mol = Chem.MolFromSmiles("c1ccncc1")
    typer = GninaVectorTyper()
    out = encode_molecule(mol, typer, add_hs=True)
    assert out["types"].shape == (11, typer.num_types())
    assert "coords" not in out
    np.testing.assert_array_equal(out["types"][:, :17].sum(axis=1), np.ones(11))


def test_encode_molecule_rejects_unknown_element():
    mol = Chem.MolFromSmiles("C[Si](C)(C)C")
    with pytest.raises(ValueError):
        encode_molecule(mol, GninaIndexTyper())
