import logging
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402

__all__ = ["plot_fee_comparison"]


def plot_fee_comparison(comparison: pd.DataFrame, output_path: str = "output/fee_comparison.png") -> None:
    """Save a bar chart of SHA and OUR sender fees per bank.

    A comparison without any priced bank is written as an empty, labelled chart.
    """
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    df = comparison.set_index("bank")[["sha_fee", "our_fee"]].astype(float)

    fig, ax = plt.subplots(figsize=(max(4, len(df) * 1.5), 4))
    if df.isna().all().all():
        logging.warning("No SWIFT fees to plot; writing an empty chart to %s", output_path)
        ax.text(0.5, 0.5, "No bank fees available", ha="center", va="center", transform=ax.transAxes)
        ax.set_xticks([])
    else:
        df.plot.bar(ax=ax, rot=20)
        ax.legend(["SHA", "OUR"])
    ax.set_ylabel("Sender fee (EUR)")
    ax.set_xlabel("")

    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
