import math
from typing import List, Optional

from src.core.structures.avl_tree import AVLTree, AVLNode, AVLInvariantError


class TreeInspector:
    """
    Leitura estrutural da AVL para depuração e validação.
    Nunca altera a árvore inspecionada.
    """
    # Altura máxima teórica de uma AVL: ~1.44 * log2(n + 2)
    HEIGHT_BOUND_FACTOR = 1.45
    EMPTY_LABEL = "<vazia>"

    @staticmethod
    def height_bound(n: int) -> float:
        """Limite superior da altura de uma AVL com n chaves."""
        return TreeInspector.HEIGHT_BOUND_FACTOR * math.log2(n + 2)

    @staticmethod
    def check_invariants(tree: AVLTree) -> int:
        """
        Percorre toda a árvore verificando ordem BST, altura em cache e
        balanceamento. Levanta AVLInvariantError na primeira violação.
        Retorna a quantidade de nós visitados.
        """
        visited = [0]
        TreeInspector._check_node(tree.root, None, None, visited)
        return visited[0]

    @staticmethod
    def _check_node(node: Optional[AVLNode], low, high, visited: List[int]) -> int:
        if node is None:
            return 0
        visited[0] += 1

        # 1. Ordem BST em relação aos limites herdados dos ancestrais
        if low is not None and not node.key > low:
            raise AVLInvariantError(f"Ordem BST violada: {node.key!r} deveria ser > {low!r}")
        if high is not None and not node.key < high:
            raise AVLInvariantError(f"Ordem BST violada: {node.key!r} deveria ser < {high!r}")

        left_h = TreeInspector._check_node(node.left, low, node.key, visited)
        right_h = TreeInspector._check_node(node.right, node.key, high, visited)

        # 2. Altura em cache
        expected = 1 + max(left_h, right_h)
        if node.height != expected:
            raise AVLInvariantError(
                f"Altura incorreta no nó {node.key!r}: cache={node.height}, real={expected}"
            )

        # 3. Balanceamento
        if abs(left_h - right_h) > 1:
            raise AVLInvariantError(
                f"Nó {node.key!r} desbalanceado: esquerda={left_h}, direita={right_h}"
            )
        return expected

    @staticmethod
    def render(tree: AVLTree) -> str:
        """
        Desenho textual da estrutura (pré-ordem, indentado pela profundidade).
        Formato apenas para depuração, não é estável.
        """
        if tree.root is None:
            return TreeInspector.EMPTY_LABEL

        lines: List[str] = []
        stack = [(tree.root, 0, "*")]
        while stack:
            node, depth, side = stack.pop()
            lines.append(f"{'  ' * depth}{side} k={node.key} h={node.height}")
            # Direita empilhada primeiro para a esquerda sair antes
            if node.right:
                stack.append((node.right, depth + 1, "R"))
            if node.left:
                stack.append((node.left, depth + 1, "L"))
        return "\n".join(lines)
