"""HTTP surface for flashcard answer scoring."""
