"""Helpers compartilhados: parsing de texto, grades numpy, caminhos mínimos e intervalos."""
