"""
Progress models - Theo dõi tiến độ học từ vựng của user

user_id là UUID từ Supabase Auth nên lưu dạng text.
"""
from sqlalchemy import Column, Integer, Text, Boolean, Date, DateTime
from sqlalchemy.sql import func
from app.database import Base


class UserProgress(Base):
    """Model UserProgress - Lịch sử luyện tập từng từ (mỗi user/word/source một dòng)"""
    
    __tablename__ = "user_progress"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    word = Column(Text, nullable=False)
    word_meaning = Column(Text, nullable=True)
    source = Column(Text, nullable=False)  # oxford, topics
    topic = Column(Text, nullable=True)
    is_mastered = Column(Boolean, default=False)
    attempts = Column(Integer, default=0)
    learned_date = Column(Date, nullable=True)
    first_attempt_date = Column(DateTime, nullable=True)
    last_attempt_date = Column(DateTime, nullable=True)
    ai_feedback = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<UserProgress(user_id={self.user_id}, word={self.word})>"


class UserWordStrings(Base):
    """
    Model UserWordStrings - Trạng thái từ vựng dạng chuỗi
    
    mastered_words / learning_words: các từ nối với nhau bằng dấu nháy đơn,
    VD: "apple'banana'map"
    """
    
    __tablename__ = "user_word_strings"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Text, nullable=False, index=True)
    source = Column(Text, nullable=False)  # oxford, topics
    mastered_words = Column(Text, default="")
    learning_words = Column(Text, default="")
    last_updated = Column(DateTime, server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<UserWordStrings(user_id={self.user_id}, source={self.source})>"
