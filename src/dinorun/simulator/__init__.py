"""pygame desktop front end for DINORUN."""
