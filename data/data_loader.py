"""数据加载模块 - 变量值文件、表达式文件和绑定表"""
import logging
import os

import pandas as pd

from core.bindings import DEFAULT_ALPHABET, VariableBinding, validate_alphabet

logger = logging.getLogger(__name__)


def load_variable_values(file_path, alphabet=DEFAULT_ALPHABET):
    """
    读取变量值文件：每行一个整数，按标识符顺序，最多读取len(alphabet)行。

    Parameters:
    - file_path: 值文件路径
    - alphabet: 标识符顺序

    Returns:
    - VariableBinding；行数不足时，后面的标识符保持未绑定
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Values file not found: {file_path}")

    with open(file_path, 'r', encoding='utf-8') as f:
        lines = f.read().splitlines()[:len(alphabet)]

    logger.info(f"Loading variable values from {file_path}")
    raw = pd.Series(lines, dtype=object)
    # 每行取第一个整数
    parsed = raw.str.extract(r'^\s*([+-]?\d+)', expand=False)
    bad = parsed.isna()
    if bad.any():
        line_no = int(bad.idxmax()) + 1
        raise ValueError(f"Line {line_no} of {file_path} is not an integer: {lines[line_no - 1]!r}")

    values = pd.to_numeric(parsed).astype('int64').tolist()
    bindings = VariableBinding.from_sequence(values, alphabet=alphabet)
    logger.info(f"Loaded {len(bindings)} values: {dict(bindings)}")
    return bindings


def load_expressions(file_path):
    """每个非空行是一个中缀表达式"""
    with open(file_path, 'r', encoding='utf-8') as f:
        expressions = [line.strip() for line in f if line.strip()]
    logger.info(f"Loaded {len(expressions)} expressions from {file_path}")
    return expressions


def load_binding_table(file_path, alphabet=DEFAULT_ALPHABET):
    """
    读取批量绑定表（CSV，每个变量一列，每行一组取值）
    """
    validate_alphabet(alphabet)
    logger.info(f"Loading binding table from {file_path}")
    table = pd.read_csv(file_path)
    table.columns = [str(column).strip() for column in table.columns]

    unknown = [column for column in table.columns if column not in alphabet or len(column) != 1]
    if unknown:
        raise ValueError(f"Columns outside the alphabet {alphabet!r}: {unknown}")
    if table.isna().any().any():
        raise ValueError(f"Binding table {file_path} has missing values")

    numeric = table.apply(pd.to_numeric, errors='coerce')
    if numeric.isna().any().any():
        raise ValueError(f"Binding table {file_path} has non-numeric values")
    fractional = (numeric % 1 != 0).any()
    if fractional.any():
        raise ValueError(
            f"Binding table {file_path} has non-integer values in columns: {list(fractional[fractional].index)}")

    table = numeric.astype('int64')
    logger.info(f"Binding table shape: {table.shape}")
    return table
