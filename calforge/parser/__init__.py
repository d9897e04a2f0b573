"""Parse iCalendar text into components, properties and parameters, and write them back."""