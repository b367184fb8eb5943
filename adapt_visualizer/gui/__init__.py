"""Qt user interface for the ADAPT Visualizer."""
