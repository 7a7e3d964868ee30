import numpy as np
from pathlib import Path


FINAL_STATE_FORMAT = "%.15e"


def ensure_directory_exists(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def csv_frame_filename(step: int) -> str:
    return f"data-{step}.csv"


def final_state_table(state: dict[str, np.ndarray]) -> np.ndarray:
    """Rows of r_x r_y r_z v_x v_y v_z f_x f_y f_z mass, one per body."""
    return np.column_stack([state['x'], state['v'], state['f'], state['mass']])


def save_final_state(state: dict[str, np.ndarray], filepath: Path) -> None:
    """Write the snapshot in scientific notation with 15 digits after the point."""
    ensure_directory_exists(filepath.parent)
    np.savetxt(filepath, final_state_table(state), fmt=FINAL_STATE_FORMAT, delimiter=" ")


def save_csv_frame(state: dict[str, np.ndarray], directory: Path, step: int) -> Path:
    """Write one frame of r_x, r_y, r_z, radius per body and return its path."""
    ensure_directory_exists(directory)
    filepath = directory / csv_frame_filename(step)
    table = np.column_stack([state['x'], state['radius']])
    np.savetxt(filepath, table, fmt=FINAL_STATE_FORMAT, delimiter=", ")
    return filepath


def save_numpy_array(array: np.ndarray, filepath: Path) -> None:
    ensure_directory_exists(filepath.parent)
    np.save(filepath, array)
