"""
Reset the blogs collection to the canonical seed data.
Run from the project root: python seed_blogs.py
"""
import asyncio

from dotenv import load_dotenv

load_dotenv()

from bloglist.config import settings  # noqa: E402
from bloglist.dependencies import build_blog_store  # noqa: E402

INITIAL_BLOGS = [
    {
        "_id": "5a422a851b54a676234d17f7",
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
        "__v": 0,
    },
    {
        "_id": "5a422aa71b54a676234d17f8",
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
        "__v": 0,
    },
    {
        "_id": "5a422b3a1b54a676234d17f9",
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
        "__v": 0,
    },
]


async def main():
    store = build_blog_store(settings)
    await store.connect()
    try:
        # 1. Clear old blogs
        print("[1/2] Deleting old blogs...")
        removed = await store.delete_all()
        print(f"  Deleted {removed} blogs")

        # 2. Insert seed data
        print("\n[2/2] Inserting seed blogs...")
        await store.insert_many(INITIAL_BLOGS)
        final = len(await store.list_blogs())
        print(f"  Done! Total blogs: {final}")
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
