import sys
import os
import time
import numpy as np
import matplotlib.pyplot as plt

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures.avl_tree import AVLTree

# Tamanhos de árvore para testar (Escala Logarítmica: 100 -> 100.000)
SIZES = [100, 500, 1000, 5000, 10000, 20000, 50000, 100000]
OUTPUT_PATH = "data/benchmark_results.png"


def run_benchmark(sizes=SIZES, seed=42):
    print("--- INICIANDO BENCHMARK DE ESCALABILIDADE ---")
    rng = np.random.default_rng(seed)

    insert_times = []
    delete_times = []
    heights = []

    for n in sizes:
        print(f"\nTestando com N = {n} chaves...")
        avl = AVLTree()
        # Embaralha para testar o balanceamento da AVL
        keys = [int(k) for k in rng.permutation(n)]

        # --- TESTE 1: Inserção ---
        start_time = time.perf_counter()
        for k in keys:
            avl.insert(k)
        avg_insert = (time.perf_counter() - start_time) / n
        insert_times.append(avg_insert * 1000)  # ms
        heights.append(avl.height())

        # --- TESTE 2: Remoção de metade das chaves ---
        targets = keys[: n // 2]
        start_time = time.perf_counter()
        for k in targets:
            avl.delete(k)
        avg_delete = (time.perf_counter() - start_time) / len(targets)
        delete_times.append(avg_delete * 1000)  # ms

        print(f"   > Inserção (méd): {insert_times[-1]:.4f} ms")
        print(f"   > Remoção (méd):  {delete_times[-1]:.4f} ms")
        print(f"   > Altura:         {heights[-1]} (limite {1.44 * np.log2(n + 2):.1f})")

    plot_results(sizes, insert_times, delete_times, heights)
    return insert_times, delete_times, heights


def plot_results(sizes, inserts, deletes, heights):
    sizes = np.array(sizes)
    plt.figure(figsize=(12, 5))

    # Gráfico 1: Tempo por operação
    plt.subplot(1, 2, 1)
    plt.plot(sizes, inserts, marker='o', label='Inserção AVL')
    plt.plot(sizes, deletes, marker='x', label='Remoção AVL')
    plt.xscale('log')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Tempo Médio (ms)')
    plt.title('Performance AVL: O(log n)')
    plt.legend()
    plt.grid(True)

    # Gráfico 2: Altura observada vs limites teóricos
    plt.subplot(1, 2, 2)
    plt.plot(sizes, heights, marker='s', color='orange', label='Altura observada')
    plt.plot(sizes, np.log2(sizes + 1), 'g--', label='log2(n+1) (perfeita)')
    plt.plot(sizes, 1.44 * np.log2(sizes + 2), 'r--', label='1.44·log2(n+2) (pior AVL)')
    plt.xscale('log')
    plt.xlabel('Número de Chaves (N)')
    plt.ylabel('Altura')
    plt.title('Altura AVL vs Limites')
    plt.legend()
    plt.grid(True)

    # Salva em imagem para colocar no relatório
    os.makedirs(os.path.dirname(OUTPUT_PATH), exist_ok=True)
    plt.savefig(OUTPUT_PATH)
    print(f"\n>> Gráfico salvo em '{OUTPUT_PATH}'")
    plt.show()


if __name__ == "__main__":
    run_benchmark()
