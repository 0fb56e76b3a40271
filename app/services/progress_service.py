"""
Progress Service - Xử lý tiến độ học từ vựng và thống kê

=== CHỨC NĂNG ===
1. Lưu lịch sử luyện tập từng từ (user_progress)
2. Cập nhật trạng thái mastered / learning (user_word_strings)
3. Tổng hợp thống kê theo nguồn từ vựng (oxford, topics)

=== TRẠNG THÁI TỪ ===
- Trả lời đúng → chuyển từ sang mastered
- Trả lời sai → chuyển từ sang learning
- Chưa từng luyện → not-started

=== THỐNG KÊ ===
- masteryRate = mastered / (mastered + learning) * 100
- Oxford: completionRate = mastered / 3000 * 100
- Topics: không có tổng cố định nên completionRate = "N/A"
"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from sqlalchemy.orm import Session

from app.config import settings
from app.models import UserProgress, UserWordStrings
from app.schemas.progress import (
    ProgressStats, StatsOverview, SourceStats, StatsData
)
from app.utils.word_lists import split_words, join_words, move_word, word_status


def format_rate(part: int, total: int) -> str:
    """Tỉ lệ phần trăm, 1 chữ số thập phân; "0" khi total = 0"""
    if total <= 0:
        return "0"
    return f"{part / total * 100:.1f}"


class ProgressService:
    """Service quản lý tiến độ học từ vựng"""
    
    SOURCES = ("oxford", "topics")
    
    # ============================================================
    # USER_PROGRESS
    # ============================================================
    
    def list_progress(self, db: Session, user_id: str, source: Optional[str] = None) -> List[UserProgress]:
        """Lấy lịch sử luyện tập, mới nhất trước. source = None/"all" → mọi nguồn"""
        query = db.query(UserProgress).filter(UserProgress.user_id == user_id)
        if source and source != "all":
            query = query.filter(UserProgress.source == source)
        return query.order_by(UserProgress.updated_at.desc(), UserProgress.id.desc()).all()
    
    def summarize_progress(self, items: List[UserProgress]) -> ProgressStats:
        total_words = len(items)
        mastered_words = sum(1 for p in items if p.is_mastered)
        return ProgressStats(
            total_words=total_words,
            mastered_words=mastered_words,
            in_progress=total_words - mastered_words,
            mastery_rate=format_rate(mastered_words, total_words)
        )
    
    def save_progress(
        self,
        db: Session,
        user_id: str,
        word: str,
        source: str,
        word_meaning: Optional[str] = None,
        topic: Optional[str] = None,
        is_mastered: bool = False,
        feedback: Optional[str] = None
    ) -> UserProgress:
        """
        Thêm hoặc cập nhật 1 dòng user_progress theo (user, word, source)
        
        - attempts tăng 1 mỗi lần gọi
        - learned_date giữ ngày đầu tiên
        - first_attempt_date chỉ set khi tạo mới
        """
        now = datetime.utcnow()
        
        record = db.query(UserProgress).filter(
            UserProgress.user_id == user_id,
            UserProgress.word == word,
            UserProgress.source == source
        ).first()
        
        if record is None:
            record = UserProgress(
                user_id=user_id,
                word=word,
                source=source,
                attempts=0,
                first_attempt_date=now,
                created_at=now
            )
            db.add(record)
        
        record.word_meaning = word_meaning
        record.topic = topic or None
        record.is_mastered = is_mastered
        record.attempts = (record.attempts or 0) + 1
        record.learned_date = record.learned_date or now.date()
        record.last_attempt_date = now
        record.ai_feedback = feedback
        record.updated_at = now
        
        db.commit()
        db.refresh(record)
        return record
    
    # ============================================================
    # USER_WORD_STRINGS
    # ============================================================
    
    def get_word_strings(self, db: Session, user_id: str, source: str) -> Optional[UserWordStrings]:
        return db.query(UserWordStrings).filter(
            UserWordStrings.user_id == user_id,
            UserWordStrings.source == source
        ).first()
    
    def get_word_status(self, db: Session, user_id: str, source: str, word: str) -> str:
        record = self.get_word_strings(db, user_id, source)
        if record is None:
            return "not-started"
        return word_status(
            split_words(record.mastered_words),
            split_words(record.learning_words),
            word
        )
    
    def update_word_status(self, db: Session, user_id: str, source: str, word: str, is_correct: bool) -> str:
        """
        Chuyển từ sang mastered (đúng) hoặc learning (sai)
        
        Returns:
            Trạng thái mới: "mastered" | "learning"
        """
        record = self.get_word_strings(db, user_id, source)
        if record is None:
            record = UserWordStrings(user_id=user_id, source=source)
            db.add(record)
        
        mastered, learning = move_word(
            split_words(record.mastered_words),
            split_words(record.learning_words),
            word,
            is_correct
        )
        record.mastered_words = join_words(mastered)
        record.learning_words = join_words(learning)
        record.last_updated = datetime.utcnow()
        
        db.commit()
        return "mastered" if is_correct else "learning"
    
    # ============================================================
    # STATS
    # ============================================================
    
    def get_user_stats(self, db: Session, user_id: str) -> StatsData:
        """Tổng hợp thống kê từ tất cả dòng user_word_strings của user"""
        rows = db.query(UserWordStrings).filter(UserWordStrings.user_id == user_id).all()
        
        counts: Dict[str, Tuple[int, int]] = {}
        for row in rows:
            source = row.source or "unknown"
            counts[source] = (
                len(split_words(row.mastered_words)),
                len(split_words(row.learning_words))
            )
        
        return self.build_stats(counts)
    
    def build_stats(self, counts: Dict[str, Tuple[int, int]]) -> StatsData:
        """
        counts: source -> (mastered, learning)
        """
        total_mastered = sum(m for m, _ in counts.values())
        total_learning = sum(l for _, l in counts.values())
        total_studied = total_mastered + total_learning
        
        oxford_mastered, oxford_learning = counts.get("oxford", (0, 0))
        topics_mastered, topics_learning = counts.get("topics", (0, 0))
        target = settings.OXFORD_TARGET_WORDS
        
        return StatsData(
            overview=StatsOverview(
                total_mastered=total_mastered,
                total_learning=total_learning,
                total_studied=total_studied,
                mastery_rate=format_rate(total_mastered, total_studied)
            ),
            by_source={
                "oxford": SourceStats(
                    mastered=oxford_mastered,
                    learning=oxford_learning,
                    total=oxford_mastered + oxford_learning,
                    mastery_rate=format_rate(oxford_mastered, oxford_mastered + oxford_learning),
                    progress=f"{oxford_mastered}/{target}",
                    completion_rate=f"{oxford_mastered / target * 100:.1f}"
                ),
                "topics": SourceStats(
                    mastered=topics_mastered,
                    learning=topics_learning,
                    total=topics_mastered + topics_learning,
                    mastery_rate=format_rate(topics_mastered, topics_mastered + topics_learning),
                    progress=f"{topics_mastered}",
                    completion_rate="N/A"
                ),
            }
        )
    
    def empty_stats(self) -> StatsData:
        """Thống kê rỗng, trả kèm response lỗi để UI vẫn hiển thị được"""
        stats = self.build_stats({})
        stats.by_source["oxford"].completion_rate = "0"
        return stats


# Singleton instance
progress_service = ProgressService()
