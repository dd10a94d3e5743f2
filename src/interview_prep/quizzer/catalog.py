"""Bundled Java and Maven interview questions."""

from __future__ import annotations

from .bank import make_question

DEFAULT_QUESTIONS = (
    make_question(
        "OOP",
        "Easy",
        "Which of the following is NOT one of the four pillars of "
        "Object-Oriented Programming?",
        ["Encapsulation", "Inheritance", "Polymorphism", "Recursion"],
        4,
        "Recursion is a programming concept, not an OOP pillar. The four "
        "pillars are Encapsulation, Inheritance, Polymorphism, and "
        "Abstraction.",
    ),
    make_question(
        "OOP",
        "Medium",
        "What is the difference between method overloading and method "
        "overriding?",
        [
            "Overloading is compile-time polymorphism, overriding is runtime "
            "polymorphism",
            "Overriding is compile-time polymorphism, overloading is runtime "
            "polymorphism",
            "Both are compile-time polymorphism",
            "Both are runtime polymorphism",
        ],
        1,
        "Method overloading is resolved at compile time (static binding), "
        "while method overriding is resolved at runtime (dynamic binding).",
    ),
    make_question(
        "OOP",
        "Hard",
        "What is the output of the following code?\n"
        'String s1 = new String("Hello");\n'
        'String s2 = new String("Hello");\n'
        "System.out.println(s1 == s2);",
        ["true", "false", "Compilation error", "Runtime error"],
        2,
        "The == operator compares object references, not content. s1 and s2 "
        "are different objects in memory, so it returns false.",
    ),
    make_question(
        "Collections",
        "Easy",
        "Which collection maintains insertion order?",
        ["HashSet", "TreeSet", "ArrayList", "HashMap"],
        3,
        "ArrayList maintains insertion order, while HashSet and TreeSet do "
        "not. HashMap makes no ordering guarantee; use LinkedHashMap for "
        "that.",
    ),
    make_question(
        "Collections",
        "Medium",
        "What is the time complexity of adding an element to an ArrayList?",
        ["O(1)", "O(log n)", "O(n)", "Amortized O(1)"],
        4,
        "Adding to ArrayList is amortized O(1). Most appends are O(1), but "
        "occasionally the backing array is resized, which is O(n).",
    ),
    make_question(
        "Collections",
        "Hard",
        "Which of the following is thread-safe?",
        ["ArrayList", "HashMap", "Vector", "LinkedList"],
        3,
        "Vector is synchronized, while ArrayList, HashMap, and LinkedList "
        "are not thread-safe by default.",
    ),
    make_question(
        "Exception Handling",
        "Easy",
        "What is the difference between checked and unchecked exceptions?",
        [
            "Checked exceptions must be handled, unchecked exceptions are "
            "optional",
            "Unchecked exceptions must be handled, checked exceptions are "
            "optional",
            "Both must be handled",
            "Neither needs to be handled",
        ],
        1,
        "Checked exceptions (extending Exception) must be caught or declared "
        "with throws, while unchecked exceptions (extending "
        "RuntimeException) are optional.",
    ),
    make_question(
        "Exception Handling",
        "Medium",
        "What happens if an exception is thrown in a finally block?",
        [
            "The exception is ignored",
            "The exception is caught by the outer try-catch",
            "The program terminates",
            "The finally block is skipped",
        ],
        2,
        "An exception thrown in a finally block is caught by an enclosing "
        "try-catch or propagated up the call stack.",
    ),
    make_question(
        "Multithreading",
        "Easy",
        "What is the difference between Thread.start() and Thread.run()?",
        [
            "start() creates a new thread, run() executes in the same thread",
            "run() creates a new thread, start() executes in the same thread",
            "Both create new threads",
            "Both execute in the same thread",
        ],
        1,
        "start() creates a new thread and calls run() in that thread, while "
        "run() executes the code in the current thread.",
    ),
    make_question(
        "Multithreading",
        "Medium",
        "What is the purpose of the volatile keyword?",
        [
            "Makes a variable thread-safe",
            "Ensures visibility of changes across threads",
            "Prevents deadlocks",
            "Improves performance",
        ],
        2,
        "volatile makes writes to the variable immediately visible to all "
        "threads, but it does not make compound operations atomic.",
    ),
    make_question(
        "Multithreading",
        "Hard",
        "What is a deadlock?",
        [
            "When a thread is waiting for a resource that will never be "
            "available",
            "When two or more threads are waiting for each other to release "
            "resources",
            "When a thread consumes too much memory",
            "When a thread runs too long",
        ],
        2,
        "A deadlock occurs when two or more threads wait for each other to "
        "release resources, creating a circular dependency.",
    ),
    make_question(
        "Maven",
        "Easy",
        "What does POM stand for in Maven?",
        [
            "Project Object Model",
            "Project Organization Method",
            "Package Object Model",
            "Process Object Model",
        ],
        1,
        "POM stands for Project Object Model, the fundamental unit of work "
        "in Maven.",
    ),
    make_question(
        "Maven",
        "Medium",
        "What is the default scope for Maven dependencies?",
        ["test", "provided", "compile", "runtime"],
        3,
        "The default scope is 'compile', so the dependency is available on "
        "all classpaths.",
    ),
    make_question(
        "Maven",
        "Hard",
        "What is the difference between mvn clean install and mvn install?",
        [
            "clean install is faster",
            "install is faster",
            "clean install removes target directory first",
            "There is no difference",
        ],
        3,
        "mvn clean install runs the clean phase first, removing the target "
        "directory before building and installing.",
    ),
    make_question(
        "Maven",
        "Medium",
        "What is the purpose of dependencyManagement in Maven?",
        [
            "To manage all dependencies automatically",
            "To centralize dependency version management",
            "To exclude unwanted dependencies",
            "To speed up dependency resolution",
        ],
        2,
        "dependencyManagement centralizes dependency versions, which is "
        "especially useful in multi-module projects.",
    ),
    make_question(
        "Java Fundamentals",
        "Easy",
        "What is the difference between == and .equals() for String "
        "comparison?",
        [
            "== compares content, .equals() compares references",
            "== compares references, .equals() compares content",
            "Both compare content",
            "Both compare references",
        ],
        2,
        "== compares object references, while .equals() compares the actual "
        "content of the strings.",
    ),
    make_question(
        "Java Fundamentals",
        "Medium",
        "What is the difference between String, StringBuilder, and "
        "StringBuffer?",
        [
            "String is mutable, StringBuilder and StringBuffer are immutable",
            "String is immutable, StringBuilder is mutable and thread-safe, "
            "StringBuffer is mutable and not thread-safe",
            "String is immutable, StringBuilder is mutable and not "
            "thread-safe, StringBuffer is mutable and thread-safe",
            "All three are immutable",
        ],
        3,
        "String is immutable, StringBuilder is mutable but not thread-safe, "
        "and StringBuffer is mutable and thread-safe.",
    ),
)
