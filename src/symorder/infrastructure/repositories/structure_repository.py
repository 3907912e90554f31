# src/symorder/infrastructure/repositories/structure_repository.py
"""Repository implementation for protein structures."""

from typing import Dict, List, Optional, Sequence
import os
import logging
from Bio.PDB.PDBParser import PDBParser
from Bio.PDB.Structure import Structure

from ...core.interfaces.repository import Repository
from ...core.domain.models.coordinate_set import CoordinateSet
from ...core.exceptions import GeometryError

logger = logging.getLogger(__name__)


class StructureRepository(Repository[Structure]):
    """Repository for reading PDB files from a directory."""

    def __init__(self, data_dir: str):
        """
        Initialize repository with data directory.

        Args:
            data_dir: Directory containing <id>.pdb files
        """
        self._data_dir = data_dir
        self._parser = PDBParser(QUIET=True)
        self._cache: Dict[str, Structure] = {}

    def get(self, id: str) -> Optional[Structure]:
        """
        Retrieve a parsed structure by ID.

        Args:
            id: Structure identifier (file name without .pdb)

        Returns:
            Bio.PDB Structure, or None if no such file exists
        """
        if id in self._cache:
            return self._cache[id]

        file_path = os.path.join(self._data_dir, f"{id}.pdb")
        if not os.path.exists(file_path):
            return None

        structure = self._parser.get_structure(id, file_path)
        self._cache[id] = structure
        return structure

    def list(self) -> List[str]:
        """List the IDs of all PDB files in the directory."""
        return sorted(
            os.path.splitext(file_name)[0]
            for file_name in os.listdir(self._data_dir)
            if file_name.endswith(".pdb")
        )

    def get_chain_coordinates(
        self, id: str, chain_ids: Optional[Sequence[str]] = None, atom_name: str = "CA"
    ) -> CoordinateSet:
        """
        Coordinates of one atom per residue, chains concatenated in order.

        Args:
            id: Structure identifier
            chain_ids: Chains to include (all chains of the first model if None)
            atom_name: Atom taken from each residue

        Raises:
            FileNotFoundError: If the structure does not exist
            GeometryError: If a requested chain is missing or has no such atoms
        """
        structure = self.get(id)
        if structure is None:
            raise FileNotFoundError(
                os.path.join(self._data_dir, f"{id}.pdb")
            )

        model = structure[0]
        if chain_ids is None:
            chain_ids = [chain.id for chain in model]

        atoms = []
        for chain_id in chain_ids:
            if chain_id not in model:
                raise GeometryError(f"Chain {chain_id} not found in {id}")
            chain_atoms = [
                residue[atom_name] for residue in model[chain_id] if atom_name in residue
            ]
            if not chain_atoms:
                raise GeometryError(f"No {atom_name} atoms in chain {chain_id} of {id}")
            atoms.extend(chain_atoms)

        logger.info(f"Loaded {len(atoms)} {atom_name} atoms from {id} chains {list(chain_ids)}")
        return CoordinateSet.from_atoms(atoms)
