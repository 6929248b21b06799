# sidediff/utils/encoding_detector.py

import codecs

import chardet
from sidediff.config import ENCODING_SAMPLE_BYTES
from sidediff.utils.logger import logger

def detect_encoding(raw: bytes) -> str:
    """Best guess for the encoding of ``raw``; 'utf-8' when unsure."""
    # Fast path: UTF-8 is common; if it decodes, use it without chardet.
    # Incremental so a sample cut mid-character still counts as UTF-8.
    try:
        codecs.getincrementaldecoder('utf-8')().decode(raw, final=False)
        return 'utf-8'
    except UnicodeDecodeError:
        pass
    result = chardet.detect(raw)
    return result.get('encoding') or 'utf-8'

def detect_file_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file.

    Args:
        file_path (str): Path to the file

    Returns:
        str: Detected encoding or 'utf-8' as fallback
    """
    try:
        with open(file_path, 'rb') as f:
            raw = f.read(ENCODING_SAMPLE_BYTES)
    except OSError as e:
        logger.error(f"Failed to detect encoding for {file_path}: {str(e)}")
        return 'utf-8'
    return detect_encoding(raw)
