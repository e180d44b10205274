# -----------------------------
# FILE: visualize_edt.py
# -----------------------------

"""
Plot a saved distance image (edt.npy, indexed [y, x]) written by demo_circle.py.

Usage:
  python visualize_edt.py [edt.npy]
"""

import sys
import numpy as np
import matplotlib.pyplot as plt


def main():
    path = sys.argv[1] if len(sys.argv) > 1 else "edt.npy"
    img = np.load(path)

    plt.figure()
    plt.imshow(img, cmap="gray", vmin=0, vmax=255)
    plt.colorbar(label="scaled distance")
    plt.title("Euclidean Distance Transform")
    plt.xlabel("x (px)")
    plt.ylabel("y (px)")
    plt.tight_layout()
    plt.show()

if __name__ == "__main__":
    main()
