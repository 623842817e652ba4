import logging
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class AVLInvariantError(RuntimeError):
    """Estado interno impossível: a árvore perdeu uma das suas invariantes."""


class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena a chave e a altura da subárvore enraizada aqui.
    """
    def __init__(self, key):
        self.key = key
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Folha tem altura 1

    def __repr__(self):
        return f"AVLNode(key={self.key!r}, h={self.height})"


class AVLTree:
    """
    Árvore AVL de chaves únicas (qualquer tipo com ordem total).
    Inserção, remoção e busca em O(log n).

    Cada chamada recursiva recebe uma subárvore e devolve a sua substituta;
    o pai sobrescreve o próprio ponteiro com o resultado. O rebalanceamento
    acontece na volta da recursão, um nível por vez.
    """
    def __init__(self):
        self.root: Optional[AVLNode] = None
        self._size = 0

    # --- Operações Públicas ---

    def insert(self, key):
        """Insere a chave. Chave repetida é ignorada silenciosamente."""
        if self.root is None:
            self.root = AVLNode(key)
            self._size = 1
            return
        self.root = self._insert_recursive(self.root, key)

    def delete(self, key):
        """Remove a chave. Chave inexistente é ignorada silenciosamente."""
        if self.root is None:
            return
        self.root = self._delete_recursive(self.root, key)

    def height(self) -> int:
        return self._get_height(self.root)

    def count_leaves(self) -> int:
        """
        Conta as folhas da árvore.
        Atenção: um nó com um único filho NÃO conta como folha, apenas repassa
        a contagem do filho. Essa é a definição adotada, não um bug.
        """
        if self.root is None:
            return 0
        return self._count_leaves(self.root)

    def is_empty(self) -> bool:
        return self.root is None

    def inorder(self) -> List[Any]:
        """Retorna todas as chaves em ordem crescente (in-order traversal)."""
        keys: List[Any] = []
        if self.root is not None:
            self._in_order(self.root, keys)
        return keys

    def search(self, key):
        """Busca a chave em O(log n). Retorna a chave armazenada ou None."""
        current = self.root
        while current:
            if key == current.key:
                return current.key
            elif key < current.key:
                current = current.left
            else:
                current = current.right
        return None

    def min(self):
        """Menor chave da árvore (None se vazia)."""
        if self.root is None:
            return None
        return self._min_node(self.root).key

    def max(self):
        """Maior chave da árvore (None se vazia)."""
        current = self.root
        if current is None:
            return None
        while current.right:
            current = current.right
        return current.key

    def __contains__(self, key):
        return self.search(key) is not None

    def __len__(self):
        return self._size

    def __repr__(self):
        return f"AVLTree(size={self._size}, height={self.height()}, keys={self.inorder()})"

    # --- Grafo de Nós (recursão) ---

    def _insert_recursive(self, node: Optional[AVLNode], key) -> AVLNode:
        # 1. Inserção normal de BST
        if node is None:
            self._size += 1
            return AVLNode(key)

        if key < node.key:
            node.left = self._insert_recursive(node.left, key)
        elif key > node.key:
            node.right = self._insert_recursive(node.right, key)
        else:
            # Chaves duplicadas não são permitidas
            return node

        # 2. Atualizar altura e rebalancear na volta
        self._update_height(node)
        return self._rebalance(node)

    def _delete_recursive(self, node: Optional[AVLNode], key) -> Optional[AVLNode]:
        if node is None:
            return None

        if key < node.key:
            node.left = self._delete_recursive(node.left, key)
        elif key > node.key:
            node.right = self._delete_recursive(node.right, key)
        else:
            self._size -= 1
            return self._remove_node(node)

        self._update_height(node)
        return self._rebalance(node)

    def _remove_node(self, node: AVLNode) -> Optional[AVLNode]:
        """Remove o próprio nó, devolvendo o que ocupa o seu lugar."""
        left, right = node.left, node.right
        node.left = node.right = None

        if left is None:
            return right        # Sem filhos ou só o direito
        if right is None:
            return left

        # Dois filhos: o sucessor in-order (mínimo da direita) sobe para cá
        remaining, successor = self._detach_min(right)
        successor.left = left
        successor.right = remaining
        self._update_height(successor)
        return self._rebalance(successor)

    def _detach_min(self, node: AVLNode):
        """
        Desliga o nó de menor chave da subárvore.
        Retorna (subárvore restante, nó mínimo), rebalanceando cada nível.
        """
        if node.left is None:
            rest = node.right
            node.right = None
            return rest, node

        node.left, minimum = self._detach_min(node.left)
        self._update_height(node)
        return self._rebalance(node), minimum

    def _rebalance(self, node: AVLNode) -> AVLNode:
        diff = self._get_balance(node)

        if abs(diff) <= 1:
            return node

        # Pesado à direita
        if diff == -2:
            right = node.right
            if self._get_height(right.left) > self._get_height(right.right):
                # Caso Direita-Esquerda: rotação dupla
                logger.debug("Rotação dupla direita-esquerda em %r", node.key)
                node.right = self._rotate_right(right)
                self._update_height(node)
            return self._rotate_left(node)

        # Pesado à esquerda
        if diff == 2:
            left = node.left
            if self._get_height(left.right) > self._get_height(left.left):
                # Caso Esquerda-Direita: rotação dupla
                logger.debug("Rotação dupla esquerda-direita em %r", node.key)
                node.left = self._rotate_left(left)
                self._update_height(node)
            return self._rotate_right(node)

        raise AVLInvariantError(
            f"Fator de balanceamento inválido ({diff}) no nó {node.key!r}"
        )

    def _rotate_left(self, z: AVLNode) -> AVLNode:
        """
        Rotação simples à esquerda: o filho direito vira a raiz da subárvore.
        Usada quando o peso está na direita (Right-Right).
        """
        logger.debug("Rotação à esquerda em %r", z.key)
        y = z.right
        T2 = y.left

        y.left = z
        z.right = T2

        # z ficou abaixo de y, então a altura dele vem primeiro
        self._update_height(z)
        self._update_height(y)

        return y

    def _rotate_right(self, z: AVLNode) -> AVLNode:
        """
        Rotação simples à direita: espelho de _rotate_left.
        Usada quando o peso está na esquerda (Left-Left).
        """
        logger.debug("Rotação à direita em %r", z.key)
        y = z.left
        T3 = y.right

        y.right = z
        z.left = T3

        self._update_height(z)
        self._update_height(y)

        return y

    # --- Métodos Auxiliares ---

    def _get_height(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return node.height

    def _get_balance(self, node: Optional[AVLNode]) -> int:
        if not node:
            return 0
        return self._get_height(node.left) - self._get_height(node.right)

    def _update_height(self, node: AVLNode):
        node.height = 1 + max(self._get_height(node.left), self._get_height(node.right))

    def _min_node(self, node: AVLNode) -> AVLNode:
        while node.left:
            node = node.left
        return node

    def _count_leaves(self, node: AVLNode) -> int:
        if node.left and node.right:
            return self._count_leaves(node.left) + self._count_leaves(node.right)
        if node.left:
            return self._count_leaves(node.left)
        if node.right:
            return self._count_leaves(node.right)
        return 1

    def _in_order(self, node: Optional[AVLNode], keys: List[Any]):
        if node:
            self._in_order(node.left, keys)
            keys.append(node.key)
            self._in_order(node.right, keys)
