"""
Word list strings - Đọc/ghi danh sách từ lưu dạng chuỗi trong user_word_strings

Các từ được nối bằng dấu nháy đơn: "apple'banana'map".
Chuỗi rỗng hoặc None tương đương danh sách rỗng.
"""
from typing import List, Optional, Tuple

SEPARATOR = "'"


def split_words(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [w for w in value.split(SEPARATOR) if w]


def join_words(words: List[str]) -> str:
    return SEPARATOR.join(words)


def move_word(mastered: List[str], learning: List[str], word: str, is_correct: bool) -> Tuple[List[str], List[str]]:
    """
    Chuyển một từ sang đúng danh sách
    
    Xóa từ khỏi cả 2 danh sách rồi thêm vào cuối mastered (trả lời đúng)
    hoặc learning (trả lời sai).
    """
    mastered = [w for w in mastered if w != word]
    learning = [w for w in learning if w != word]
    if is_correct:
        mastered.append(word)
    else:
        learning.append(word)
    return mastered, learning


def word_status(mastered: List[str], learning: List[str], word: str) -> str:
    if word in mastered:
        return "mastered"
    if word in learning:
        return "learning"
    return "not-started"
