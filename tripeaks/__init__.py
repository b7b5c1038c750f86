"""TriPeaks Solver - search engine and tooling for TriPeaks solitaire."""
