"""pygame front end: board renderer and keyboard-driven play loop."""
