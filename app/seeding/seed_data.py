"""
Seed Data Script - Tạo dữ liệu mẫu cho hệ thống

Chạy script này để tạo:
1. Oxford words (Từ vựng Oxford 3000)
2. Topics (Chủ đề)
3. Topic words (Từ vựng theo chủ đề)

Chỉ thêm dữ liệu khi bảng còn trống, chạy lại nhiều lần không bị trùng.

Usage:
    python -m app.seeding.seed_data
"""
from typing import Dict, List

from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.models import OxfordWord, Topic, TopicWord


OXFORD_WORDS_DATA = [
    {"term": "apple", "meaning": "quả táo", "pos": "noun", "ipa": "/ˈæp.əl/", "topic": "food",
     "example": "She eats an apple every morning."},
    {"term": "book", "meaning": "quyển sách", "pos": "noun", "ipa": "/bʊk/", "topic": "education",
     "example": "I borrowed a book from the library."},
    {"term": "friend", "meaning": "bạn bè", "pos": "noun", "ipa": "/frend/", "topic": "people",
     "example": "My best friend lives next door."},
    {"term": "happy", "meaning": "vui vẻ, hạnh phúc", "pos": "adjective", "ipa": "/ˈhæp.i/", "topic": "feelings",
     "example": "The children look very happy today."},
    {"term": "map", "meaning": "bản đồ", "pos": "noun", "ipa": "/mæp/", "topic": "travel",
     "example": "We used a map to find the hotel."},
    {"term": "rice", "meaning": "cơm, gạo", "pos": "noun", "ipa": "/raɪs/", "topic": "food",
     "example": "Rice is the main food in Vietnam."},
    {"term": "school", "meaning": "trường học", "pos": "noun", "ipa": "/skuːl/", "topic": "education",
     "example": "The school is near my house."},
    {"term": "travel", "meaning": "đi du lịch", "pos": "verb", "ipa": "/ˈtræv.əl/", "topic": "travel",
     "example": "They travel to Da Nang every summer."},
    {"term": "water", "meaning": "nước", "pos": "noun", "ipa": "/ˈwɔː.tər/", "topic": "food",
     "example": "Please drink more water."},
    {"term": "write", "meaning": "viết", "pos": "verb", "ipa": "/raɪt/", "topic": "education",
     "example": "Write your name at the top of the page."},
]

TOPICS_DATA = {
    "Animals": {
        "description": "Các loài động vật quen thuộc",
        "words": [
            {"term": "cat", "meaning": "con mèo", "pos": "noun", "example": "The cat is sleeping on the sofa."},
            {"term": "dog", "meaning": "con chó", "pos": "noun", "example": "My dog loves running in the park."},
            {"term": "bird", "meaning": "con chim", "pos": "noun", "example": "A bird is singing outside."},
        ],
    },
    "Family": {
        "description": "Các thành viên trong gia đình",
        "words": [
            {"term": "mother", "meaning": "mẹ", "pos": "noun", "example": "My mother cooks very well."},
            {"term": "father", "meaning": "bố", "pos": "noun", "example": "His father works in a bank."},
        ],
    },
    "Weather": {
        "description": "Thời tiết và các hiện tượng tự nhiên",
        "words": [
            {"term": "rain", "meaning": "mưa", "pos": "noun", "example": "The rain stopped in the afternoon."},
            {"term": "sunny", "meaning": "nắng", "pos": "adjective", "example": "It is sunny today."},
        ],
    },
}


def seed_oxford_words(db: Session) -> List[OxfordWord]:
    """Tạo từ vựng Oxford (bỏ qua nếu bảng đã có dữ liệu)"""
    print("\n📖 Creating Oxford words...")
    
    if db.query(OxfordWord).count() > 0:
        print("  ⏭️  oxford_words already has data, skipping")
        return []
    
    words = [OxfordWord(**data) for data in OXFORD_WORDS_DATA]
    db.add_all(words)
    db.commit()
    
    print(f"  ✅ Created {len(words)} Oxford words")
    return words


def seed_topics(db: Session) -> Dict[str, Topic]:
    """Tạo các chủ đề kèm từ vựng (bỏ qua nếu bảng đã có dữ liệu)"""
    print("\n📚 Creating Topics...")
    
    if db.query(Topic).count() > 0:
        print("  ⏭️  topics already has data, skipping")
        return {}
    
    topics = {}
    for name, data in TOPICS_DATA.items():
        topic = Topic(name=name, description=data["description"])
        topic.words = [TopicWord(**word) for word in data["words"]]
        db.add(topic)
        topics[name] = topic
        print(f"  ✅ Created topic: {name} ({len(data['words'])} words)")
    
    db.commit()
    return topics


def run_seed(db: Session = None) -> Dict[str, int]:
    """Main function để chạy seeding"""
    print("=" * 60)
    print("🌱 SEEDING DATABASE WITH SAMPLE DATA")
    print("=" * 60)
    
    own_session = db is None
    if own_session:
        db = SessionLocal()
    
    try:
        words = seed_oxford_words(db)
        topics = seed_topics(db)
        
        summary = {
            "oxford_words": len(words),
            "topics": len(topics),
            "topic_words": sum(len(t.words) for t in topics.values()),
        }
        
        print("\n" + "=" * 60)
        print("✅ SEEDING COMPLETED SUCCESSFULLY!")
        print("=" * 60)
        
        # Summary
        print("\n📊 Summary:")
        print(f"  - Oxford words: {summary['oxford_words']}")
        print(f"  - Topics: {summary['topics']}")
        print(f"  - Topic words: {summary['topic_words']}")
        return summary
        
    except Exception as e:
        print(f"\n❌ Error during seeding: {e}")
        db.rollback()
        raise
    finally:
        if own_session:
            db.close()


if __name__ == "__main__":
    run_seed()
