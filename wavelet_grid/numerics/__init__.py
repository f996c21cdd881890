"""Transition matrices, integer-lattice eigenvectors and the cascade."""
