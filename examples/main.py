"""
Example FastAPI app caching users with cachecore.

Run with a local Redis:
    REDIS_SERVER_URL=localhost:6379 uvicorn examples.main:app
"""

from typing import Dict, List

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from cachecore.cache import CacheApp
from cachecore.cache.manager import get_cache_app, setup_cache
from cachecore.config import get_settings


class User(BaseModel):
    id: int
    name: str


# Stand-in for a database table
USERS: Dict[int, User] = {1: User(id=1, name="alice"), 2: User(id=2, name="bob")}

app = FastAPI()
setup_cache(app, get_settings())


@app.get("/users/{user_id}", response_model=User)
async def read_user(user_id: int, cache: CacheApp = Depends(get_cache_app)):
    def load() -> User:
        if user_id not in USERS:
            raise HTTPException(status_code=404, detail="User not found")
        return USERS[user_id]

    return await cache.build("user", User).one(user_id).lazy_fetch(load)


@app.get("/users", response_model=List[User])
async def list_users(cache: CacheApp = Depends(get_cache_app)):
    everyone = cache.build("user").all(List[User])
    return await everyone.lazy_fetch(lambda: list(USERS.values()))


@app.put("/users/{user_id}", response_model=User)
async def update_user(user: User, cache: CacheApp = Depends(get_cache_app)):
    USERS[user.id] = user
    await cache.build("user").invalidate_all()
    return user
