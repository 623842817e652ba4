# src/ui/console.py
import argparse
import logging
import sys
import os
from typing import List, Optional, TextIO

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures.avl_tree import AVLTree
from src.core.structures.tree_inspector import TreeInspector

logger = logging.getLogger(__name__)


class CommandError(ValueError):
    """Comando desconhecido ou operando inválido digitado pelo usuário."""


class AVLConsole:
    """
    Interpretador de linha de comando para a Árvore AVL.
    Um comando por linha; o primeiro token escolhe a operação.
    A árvore pertence a quem cria o console e é passada a cada comando.
    """
    PROMPT = ""
    BANNER = [
        "Welcome to use AVL-Tree, Guideline:",
        "The type of data in the test AVL-Tree should be int",
        "'insert' to insert a value to the tree, i.e: insert 1",
        "'delete' to delete a value from the tree, i.e: delete 1",
        "'height' to get the height of the tree, i.e: height",
        "'count' to get the number of leaves in the tree, i.e: count",
        "'empty' to check if the tree is empty, i.e: empty",
        "'inorder' to get the in-order traversal result of the tree, i.e: inorder",
        "'show' to get the structure of the tree, i.e: show",
        "'help' to print this guideline again, i.e: help",
        "'quit' to stop the program, i.e: quit",
    ]
    FAREWELL = "Thank you for use!"

    # Comando -> quantidade de operandos inteiros
    ARITY = {
        "insert": 1,
        "delete": 1,
        "height": 0,
        "count": 0,
        "empty": 0,
        "inorder": 0,
        "show": 0,
        "help": 0,
        "quit": 0,
    }

    def __init__(self, tree: Optional[AVLTree] = None, out: Optional[TextIO] = None):
        self.tree = tree if tree is not None else AVLTree()
        self.out = out if out is not None else sys.stdout

    def emit(self, text):
        print(text, file=self.out)

    def print_banner(self):
        for line in self.BANNER:
            self.emit(line)

    @staticmethod
    def parse(line: str):
        """
        Separa a linha em (comando, operandos inteiros).
        Levanta CommandError para comando desconhecido ou operando inválido.
        """
        tokens = line.split()
        if not tokens:
            raise CommandError("Linha vazia")
        command, raw_args = tokens[0], tokens[1:]

        if command not in AVLConsole.ARITY:
            raise CommandError(f"Comando desconhecido: '{command}'")

        expected = AVLConsole.ARITY[command]
        if len(raw_args) != expected:
            raise CommandError(
                f"'{command}' espera {expected} operando(s), recebeu {len(raw_args)}"
            )

        try:
            args = [int(token) for token in raw_args]
        except ValueError:
            raise CommandError(f"Operando não é um inteiro: {' '.join(raw_args)}")

        return command, args

    def execute(self, tree: AVLTree, line: str) -> bool:
        """
        Executa uma linha contra a árvore.
        Retorna False quando o loop deve parar ('quit').
        """
        command, args = self.parse(line)
        logger.debug("Comando %s %s", command, args)

        if command == "quit":
            return False
        elif command == "insert":
            tree.insert(args[0])
        elif command == "delete":
            tree.delete(args[0])
        elif command == "height":
            self.emit(f"height is {tree.height()}")
        elif command == "count":
            self.emit(f"number of leaves nodes is {tree.count_leaves()}")
        elif command == "empty":
            self.emit(tree.is_empty())
        elif command == "inorder":
            self.emit(tree.inorder())
        elif command == "show":
            self.emit(TreeInspector.render(tree))
        elif command == "help":
            self.print_banner()
        return True

    def run(self, stream: TextIO, show_banner: bool = True):
        """Lê comandos até 'quit' ou fim da entrada."""
        if show_banner:
            self.print_banner()
            self.emit("Start:")

        for raw in stream:
            line = raw.strip()
            if not line:
                continue
            try:
                if not self.execute(self.tree, line):
                    break
            except CommandError as e:
                self.emit(f"[Erro] {e}")

        self.emit(self.FAREWELL)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Console interativo da Árvore AVL")
    parser.add_argument("--no-banner", action="store_true", help="não imprime o guia inicial")
    parser.add_argument("-v", "--verbose", action="store_true", help="log de rotações (DEBUG)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    console = AVLConsole()
    console.run(sys.stdin, show_banner=not args.no_banner)
    return 0


if __name__ == "__main__":
    sys.exit(main())
