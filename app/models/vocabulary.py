"""
OxfordWord model - Từ vựng Oxford 3000
"""
from sqlalchemy import Column, Integer, Text
from app.database import Base


class OxfordWord(Base):
    """Model OxfordWord - Từ vựng tiếng Anh kèm nghĩa tiếng Việt"""
    
    __tablename__ = "oxford_words"
    
    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    term = Column(Text, nullable=False, index=True)
    meaning = Column(Text, nullable=False)
    pos = Column(Text, nullable=True)  # noun, verb, adj, adv, etc.
    example = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    ipa = Column(Text, nullable=True)
    topic = Column(Text, nullable=True, index=True)
    
    def __repr__(self):
        return f"<OxfordWord(id={self.id}, term={self.term})>"
