from fastapi import APIRouter, Depends, HTTPException
from typing import List
from db.storage import MemoryStore, get_store
from models.course import Course, CourseCreate, CourseUpdate
from utils.progress import apply_lesson_counts, set_course_completed

router = APIRouter()

@router.get("/courses/{user_id}", response_model=List[Course])
async def list_courses(user_id: int, store: MemoryStore = Depends(get_store)):
    return store.get_courses(user_id)

@router.post("/courses", response_model=Course)
async def create_course(data: CourseCreate, store: MemoryStore = Depends(get_store)):
    return store.create_course(data)

@router.patch("/courses/{course_id}", response_model=Course)
async def update_course(course_id: int, updates: CourseUpdate, store: MemoryStore = Depends(get_store)):
    """Update a course; changing lesson counts re-derives the completed flag."""
    course = store.get_course(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    try:
        fields = apply_lesson_counts(course, updates.changed_fields())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    course = store.update_course(course_id, fields)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return course

@router.post("/courses/{course_id}/complete", response_model=Course)
async def complete_course(course_id: int, store: MemoryStore = Depends(get_store)):
    return _set_completed(store, course_id, True)

@router.post("/courses/{course_id}/incomplete", response_model=Course)
async def reopen_course(course_id: int, store: MemoryStore = Depends(get_store)):
    return _set_completed(store, course_id, False)

@router.delete("/courses/{course_id}")
async def delete_course(course_id: int, store: MemoryStore = Depends(get_store)):
    if not store.delete_course(course_id):
        raise HTTPException(status_code=404, detail="Course not found")
    return {"success": True}

def _set_completed(store: MemoryStore, course_id: int, completed: bool) -> Course:
    course = store.get_course(course_id)
    if not course:
        raise HTTPException(status_code=404, detail="Course not found")
    return store.update_course(course_id, set_course_completed(course, completed))
