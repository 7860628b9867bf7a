"""Line-oriented console input and output for the menus."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_INTEIRO = re.compile(r"\s*([+-]?\d+)")


class Terminal:
    """Reads answers line by line and writes prompts, text and errors."""

    def __init__(
        self,
        entrada: TextIO | None = None,
        saida: TextIO | None = None,
        erros: TextIO | None = None,
    ) -> None:
        self.entrada = entrada if entrada is not None else sys.stdin
        self.saida = saida if saida is not None else sys.stdout
        self.erros = erros if erros is not None else sys.stderr

    def escrever(self, texto: str) -> None:
        """Write text as it is, with no newline added."""
        self.saida.write(texto)
        self.saida.flush()

    def erro(self, texto: str) -> None:
        """Write 'ERRO: <texto>' and a newline to the error stream."""
        self.erros.write(f"ERRO: {texto}\n")
        self.erros.flush()

    def ler_linha(self, prompt: str = "") -> str:
        """Show the prompt and return the next line without its newline.

        Raises EOFError when the input is exhausted.
        """
        if prompt:
            self.escrever(prompt)
        linha = self.entrada.readline()
        if not linha:
            raise EOFError("fim da entrada")
        return linha[:-1] if linha.endswith("\n") else linha

    def ler_inteiro(self, prompt: str = "") -> int:
        """Read a line and return the integer it starts with.

        The rest of the line is ignored; ValueError is raised when the line
        does not start with a number.
        """
        numero = self._inteiro(self.ler_linha(prompt))
        if numero is None:
            raise ValueError("Entrada invalida. Por favor, insira um numero.")
        return numero

    def ler_opcao(self, prompt: str = "") -> int | None:
        """Read a menu choice: the integer the line starts with, or None if none."""
        return self._inteiro(self.ler_linha(prompt))

    @staticmethod
    def _inteiro(linha: str) -> int | None:
        achado = _INTEIRO.match(linha)
        return int(achado.group(1)) if achado else None