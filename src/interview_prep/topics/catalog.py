"""Static explanations shown from the main menu."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TopicSection:
    title: str
    body: str


@dataclass(frozen=True)
class Topic:
    key: str
    title: str
    sections: tuple[TopicSection, ...]


TOPICS: tuple[Topic, ...] = (
    Topic(
        key="oop",
        title="🏗️  Object-Oriented Programming (OOP)",
        sections=(
            TopicSection(
                "Encapsulation",
                "Keep fields private and expose behaviour through methods. "
                "A BankAccount validates deposits in deposit() instead of "
                "letting callers assign the balance directly.",
            ),
            TopicSection(
                "Inheritance",
                "A subclass reuses and specializes a superclass with "
                "'extends'. Dog extends Animal and inherits eat() while "
                "adding bark().",
            ),
            TopicSection(
                "Polymorphism",
                "Overloading picks a method at compile time from the "
                "argument types; overriding picks the subclass method at "
                "runtime through a superclass reference.",
            ),
            TopicSection(
                "Abstraction",
                "Abstract classes and interfaces describe what an object "
                "does without fixing how. Shape declares area(); Circle and "
                "Rectangle implement it.",
            ),
        ),
    ),
    Topic(
        key="collections",
        title="📦 Collections Framework",
        sections=(
            TopicSection(
                "List Interface (ArrayList, LinkedList)",
                "Ordered, index-addressable, duplicates allowed. ArrayList "
                "gives O(1) random access; LinkedList gives O(1) insertion "
                "at the ends.",
            ),
            TopicSection(
                "Set Interface (HashSet, TreeSet)",
                "No duplicates. HashSet is unordered with O(1) lookups; "
                "TreeSet keeps elements sorted with O(log n) operations.",
            ),
            TopicSection(
                "Map Interface (HashMap, TreeMap)",
                "Key to value associations. HashMap allows one null key and "
                "makes no ordering promise; TreeMap sorts by key.",
            ),
            TopicSection(
                "Queue Interface (PriorityQueue)",
                "PriorityQueue is a binary heap: offer() and poll() are "
                "O(log n) and poll() always returns the smallest element.",
            ),
        ),
    ),
    Topic(
        key="exceptions",
        title="⚠️  Exception Handling",
        sections=(
            TopicSection(
                "Try-Catch Blocks",
                "Wrap code that can fail in try and handle specific "
                "exception types in catch blocks.",
            ),
            TopicSection(
                "Multiple Catch Blocks",
                "Order catch blocks from most to least specific, or combine "
                "unrelated types with a multi-catch (A | B e).",
            ),
            TopicSection(
                "Finally Block",
                "finally runs whether or not an exception was thrown and is "
                "the place for cleanup that must always happen.",
            ),
            TopicSection(
                "Custom Exceptions",
                "Extend Exception for checked errors callers must handle, "
                "or RuntimeException for programming errors.",
            ),
            TopicSection(
                "Try-with-Resources",
                "Resources implementing AutoCloseable declared in try(...) "
                "are closed automatically in reverse order.",
            ),
        ),
    ),
    Topic(
        key="multithreading",
        title="🔄 Multithreading & Concurrency",
        sections=(
            TopicSection(
                "Thread Creation (extends Thread)",
                "Subclass Thread, override run() and call start() to run it "
                "on a new thread.",
            ),
            TopicSection(
                "Thread Creation (implements Runnable)",
                "Implement Runnable and pass it to a Thread; this keeps the "
                "class free to extend something else.",
            ),
            TopicSection(
                "Thread Synchronization",
                "synchronized methods and blocks let one thread at a time "
                "hold an object's monitor, protecting shared state.",
            ),
            TopicSection(
                "Thread Communication (wait/notify)",
                "Inside a synchronized block, wait() releases the monitor "
                "until another thread calls notify() or notifyAll().",
            ),
            TopicSection(
                "ExecutorService",
                "Submit tasks to a managed thread pool instead of creating "
                "threads by hand, then shut the pool down when finished.",
            ),
        ),
    ),
    Topic(
        key="maven",
        title="🛠️  Maven Concepts",
        sections=(
            TopicSection(
                "Project Object Model (POM)",
                "pom.xml declares coordinates (groupId, artifactId, "
                "version), packaging, dependencies and plugins.",
            ),
            TopicSection(
                "Build Lifecycle",
                "The default lifecycle runs validate, compile, test, "
                "package, verify, install and deploy in order; clean is a "
                "separate lifecycle.",
            ),
            TopicSection(
                "Dependency Scopes",
                "compile (default), provided, runtime, test and system "
                "control which classpaths a dependency joins.",
            ),
            TopicSection(
                "Dependency Management",
                "dependencyManagement in a parent POM pins versions that "
                "child modules inherit without repeating them.",
            ),
            TopicSection(
                "Plugins",
                "Plugins such as maven-compiler-plugin and "
                "maven-surefire-plugin bind goals to lifecycle phases.",
            ),
        ),
    ),
)
