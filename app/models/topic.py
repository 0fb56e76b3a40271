"""
Topic model - Chủ đề từ vựng
"""
from sqlalchemy import Column, Integer, Text, ForeignKey
from sqlalchemy.orm import relationship
from app.database import Base


class Topic(Base):
    """Model Topic - Nhóm từ vựng theo chủ đề"""
    
    __tablename__ = "topics"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    
    # Relationships
    words = relationship("TopicWord", back_populates="topic")
    
    def __repr__(self):
        return f"<Topic(id={self.id}, name={self.name})>"


class TopicWord(Base):
    """Model TopicWord - Từ vựng thuộc một chủ đề"""
    
    __tablename__ = "topic_words"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    topic_id = Column(Integer, ForeignKey("topics.id"), nullable=False, index=True)
    term = Column(Text, nullable=False)
    meaning = Column(Text, nullable=False)
    pos = Column(Text, nullable=True)
    example = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    
    topic = relationship("Topic", back_populates="words")
    
    def __repr__(self):
        return f"<TopicWord(id={self.id}, term={self.term})>"
