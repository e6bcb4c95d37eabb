from unidisc.models import Course, Faculty, Student, format_braces


def test_format_braces_empty():
    assert format_braces([]) == "{  }"


def test_format_braces_values():
    assert format_braces([1, 2, 3]) == "{ 1, 2, 3 }"


def test_course_defaults_to_three_credits():
    assert Course(101, "Intro").credits == 3


def test_course_name_is_clipped():
    course = Course(1, "x" * 80)
    assert len(course.name) == 49


def test_course_describe_without_prerequisites():
    text = Course(101, "Introduction to Programming", 3).describe()
    assert "Course ID: 101\n" in text
    assert "Name: Introduction to Programming\n" in text
    assert "Prerequisites: None\n" in text


def test_course_describe_with_prerequisites():
    course = Course(201, "Algorithms")
    course.add_prerequisite(101)
    course.add_prerequisite(102)
    assert course.prerequisites == [101, 102]
    assert "Prerequisites: 101, 102\n" in course.describe()


def test_student_enroll_and_complete():
    student = Student(1, "Ali Ahmed")
    student.enroll_course(201)
    student.complete_course(101)
    student.complete_course(102)
    assert student.enrolled_courses == [201]
    assert student.completed_courses == [101, 102]
    text = student.describe()
    assert "Enrolled Courses: { 201 }" in text
    assert "Completed Courses: { 101, 102 }" in text


def test_students_do_not_share_lists():
    first = Student(1, "A")
    second = Student(2, "B")
    first.enroll_course(5)
    assert second.enrolled_courses == []


def test_faculty_assign_course():
    faculty = Faculty(1, "Dr. Muhammad Ali")
    faculty.assign_course(101)
    assert faculty.assigned_courses == [101]
    assert "Assigned Courses: { 101 }" in faculty.describe()
    assert "Name: Dr. Muhammad Ali\n" in faculty.describe()