"""A month calendar that reports the date the user picks."""

from __future__ import annotations

import calendar
import datetime


def format_selected_date(day: datetime.date) -> str:
    """Return the label text for a selected date (DD-MM-YYYY)."""
    return f"Selected Date: {day.day:02d}-{day.month:02d}-{day.year:04d}"


def month_grid(year: int, month: int) -> list[list[int]]:
    """Return the weeks of a month, Sunday first, with 0 for days outside it."""
    return calendar.Calendar(firstweekday=calendar.SUNDAY).monthdayscalendar(
        year, month
    )


def launch_calendar(parent=None, registry=None):
    """Open the calendar window; run its own loop when there is no parent."""
    import tkinter as tk

    window = tk.Tk() if parent is None else tk.Toplevel(parent)
    window.title("VERTEX Calendar ")
    window.geometry("300x300")
    window.configure(padx=10, pady=10)

    today = datetime.date.today()
    shown = {"year": today.year, "month": today.month}

    header = tk.Frame(window)
    header.pack(fill="x")
    title = tk.Label(header)
    days = tk.Frame(window)
    days.pack(fill="both", expand=True, pady=5)
    selected = tk.Label(window, text="Select a date...")
    selected.pack(pady=5)

    def pick(day: int) -> None:
        chosen = datetime.date(shown["year"], shown["month"], day)
        selected.configure(text=format_selected_date(chosen))

    def render() -> None:
        for child in days.winfo_children():
            child.destroy()
        title.configure(text=f"{calendar.month_name[shown['month']]} {shown['year']}")
        for col, name in enumerate(("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")):
            tk.Label(days, text=name).grid(row=0, column=col)
            days.columnconfigure(col, weight=1)
        for r, week in enumerate(month_grid(shown["year"], shown["month"]), start=1):
            for c, day in enumerate(week):
                if day:
                    tk.Button(days, text=str(day), command=lambda d=day: pick(d)).grid(
                        row=r, column=c, sticky="nsew"
                    )

    def shift(delta: int) -> None:
        index = shown["year"] * 12 + shown["month"] - 1 + delta
        shown["year"], month0 = divmod(index, 12)
        shown["month"] = month0 + 1
        render()

    tk.Button(header, text="<", command=lambda: shift(-1)).pack(side="left")
    tk.Button(header, text=">", command=lambda: shift(1)).pack(side="right")
    title.pack(side="left", expand=True)
    render()

    def on_destroy(event) -> None:
        if event.widget is window and registry is not None:
            registry.close("calendar")

    window.bind("<Destroy>", on_destroy, add="+")
    if parent is None:
        window.mainloop()
    return window